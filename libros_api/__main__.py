"""Run the API with ``python -m libros_api`` (HOST/PORT from the environment)."""
import os

import uvicorn

if __name__ == "__main__":
    uvicorn.run(
        "libros_api.app:app",
        host=os.getenv("HOST", "127.0.0.1"),
        port=int(os.getenv("PORT", "8000")),
        log_config=None,
    )
