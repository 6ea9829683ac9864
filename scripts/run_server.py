# scripts/run_server.py
import argparse
import os

import uvicorn


def main(argv=None) -> None:
    parser = argparse.ArgumentParser(description="Serve the AIA assessment API.")
    parser.add_argument("--host", default=os.getenv("HOST", "0.0.0.0"))
    parser.add_argument("--port", type=int, default=int(os.getenv("PORT", "3000")))
    parser.add_argument("--reload", action="store_true", help="restart on code changes (development only)")
    args = parser.parse_args(argv)

    uvicorn.run("aia_assess.main:app", host=args.host, port=args.port, reload=args.reload)


if __name__ == "__main__":
    main()
