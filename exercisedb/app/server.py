"""Command-line entry point that runs the API under uvicorn."""

import uvicorn

from .app import app


def main() -> None:
    port = app.state.context.settings.port
    print(f"Server is running on http://localhost:{port}")
    print(f"API Documentation: http://localhost:{port}/docs")
    print(f"Swagger JSON: http://localhost:{port}/swagger")
    uvicorn.run(app, host="0.0.0.0", port=port)


if __name__ == "__main__":
    main()
