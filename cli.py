#!/usr/bin/env python3
"""
Command-line interface for the customer registration services.

Usage:
    uv run python cli.py [command] [options]

Commands:
    demo        Run the registration workflow in-process
    serve       Start one of the services
    test        Run the test suite

Examples:
    uv run python cli.py demo
    uv run python cli.py serve customer --port 8080
    uv run python cli.py serve notification --port 8082
    uv run python cli.py serve fraud --port 8081
"""

import argparse
import subprocess
import sys

SERVICE_APPS = {
    "customer": "customer.api:app",
    "notification": "notification.api:app",
    "fraud": "fraud.api:app",
}

DEFAULT_PORTS = {
    "customer": 8080,
    "fraud": 8081,
    "notification": 8082,
}


def run_demo() -> None:
    """Run the registration demo."""
    from customer.demo import run_registration_demo
    run_registration_demo()


def run_tests(args: list[str]) -> None:
    """Run the test suite."""
    cmd = ["uv", "run", "pytest"] + args
    subprocess.run(cmd)


def run_server(service: str, host: str, port: int, reload: bool) -> None:
    """Start a service with uvicorn."""
    import uvicorn
    
    app_path = SERVICE_APPS.get(service)
    if app_path is None:
        print(f"Unknown service: {service}")
        sys.exit(1)
    
    print(f"Starting {service} service at http://{host}:{port}")
    print(f"API docs available at http://{host}:{port}/docs")
    uvicorn.run(app_path, host=host, port=port, reload=reload)


def main() -> None:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Customer Registration Services CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s demo
  %(prog)s serve customer --reload
  %(prog)s serve notification
  %(prog)s test -v
        """,
    )
    
    subparsers = parser.add_subparsers(dest="command", help="Command to run")
    
    # Demo command
    subparsers.add_parser("demo", help="Run the registration workflow in-process")
    
    # Test command
    test_parser = subparsers.add_parser("test", help="Run the test suite")
    test_parser.add_argument(
        "pytest_args",
        nargs="*",
        default=[],
        help="Arguments to pass to pytest",
    )
    
    # Serve command
    serve_parser = subparsers.add_parser("serve", help="Start a service")
    serve_parser.add_argument(
        "service",
        choices=sorted(SERVICE_APPS),
        help="Which service to start",
    )
    serve_parser.add_argument("--host", default="127.0.0.1", help="Host to bind to")
    serve_parser.add_argument("--port", type=int, default=None, help="Port to bind to")
    serve_parser.add_argument("--reload", action="store_true", help="Enable auto-reload")
    
    args = parser.parse_args()
    
    if args.command == "demo":
        run_demo()
    elif args.command == "test":
        run_tests(args.pytest_args)
    elif args.command == "serve":
        port = args.port or DEFAULT_PORTS[args.service]
        run_server(args.service, args.host, port, args.reload)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
