"""Tour ticket back office HTTP entry point

    python api.py --reload
    uvicorn api:app --port 8000
"""

import argparse
import uvicorn
from config import ApplicationConfig
from src.api.app import create_app

app = create_app(ApplicationConfig)


def main():
    parser = argparse.ArgumentParser(description="Run the ticket back office API")
    parser.add_argument("--host", default=ApplicationConfig.API_HOST)
    parser.add_argument("--port", type=int, default=ApplicationConfig.API_PORT)
    parser.add_argument("--reload", action="store_true", help="Restart on code changes (development)")
    args = parser.parse_args()

    uvicorn.run(
        "api:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=str(ApplicationConfig.LOG_LEVEL).lower(),
    )


if __name__ == "__main__":
    main()
