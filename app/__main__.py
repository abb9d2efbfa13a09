# Standard library imports
import logging

# External package imports
import uvicorn

# Local application imports
from .core.config import get_settings


def main() -> None:
    """Run the API with uvicorn on the configured port"""
    logging.basicConfig(level=logging.INFO)
    uvicorn.run("app.main:app", host="0.0.0.0", port=get_settings().port)


if __name__ == "__main__":
    main()
