#!/usr/bin/env python3
"""
Convenience script to run the suggestion web API.

Usage:
    python run_server.py
    python run_server.py --port 8080
    python run_server.py --debug
"""

import argparse

from web.app import app


def main(argv=None):
    parser = argparse.ArgumentParser(description='Run N-gram Suggestion Web API')
    parser.add_argument('--host', default='127.0.0.1', help='Host to bind to')
    parser.add_argument('--port', type=int, default=5000, help='Port to bind to')
    parser.add_argument('--debug', action='store_true', help='Enable debug mode')

    args = parser.parse_args(argv)

    print(f"\nStarting N-gram Suggestion API on http://{args.host}:{args.port}")
    print("POST /api/train, then GET /api/suggest?input=...\n")

    app.run(host=args.host, port=args.port, debug=args.debug, threaded=True)


if __name__ == '__main__':
    main()
