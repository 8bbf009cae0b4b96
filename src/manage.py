"""Pizzeria storefront management CLI.

The catalogue lives in Protean's in-memory provider, so a menu only exists
inside the process that created it. ``serve --seed-demo-menu`` therefore
seeds the demo menu in the server process itself.

Usage:
    python src/manage.py show-menu                        # Print the demo menu
    python src/manage.py serve                            # Run the API
    python src/manage.py serve --seed-demo-menu --reload  # Run it with the demo menu
"""

import argparse
import os
import sys


def print_menu(menu) -> None:
    from ordering.shared.money import format_price

    for category, pizzas in menu.items():
        print(category)
        for name, price, _description in pizzas:
            print(f"  {name:<24} {format_price(price)}")


def show_menu() -> None:
    from catalogue.menu.seed import DEMO_MENU

    print_menu(DEMO_MENU)


def serve(host: str = "127.0.0.1", port: int = 8000, seed_demo_menu: bool = False, reload: bool = False) -> None:
    """Run the storefront API with uvicorn."""
    import uvicorn

    if seed_demo_menu:
        # Read by app.py at import time, in the worker process too
        os.environ["SEED_DEMO_MENU"] = "1"
        print("Demo menu will be seeded at startup.")

    uvicorn.run("app:app", host=host, port=port, reload=reload)


def main(argv=None):
    parser = argparse.ArgumentParser(description="Pizzeria storefront management")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("show-menu", help="Print the demo menu")

    serve_parser = subparsers.add_parser("serve", help="Run the storefront API")
    serve_parser.add_argument("--host", default="127.0.0.1")
    serve_parser.add_argument("--port", type=int, default=8000)
    serve_parser.add_argument("--seed-demo-menu", action="store_true", help="Load the demo menu at startup")
    serve_parser.add_argument("--reload", action="store_true")

    args = parser.parse_args(argv)

    if args.command == "show-menu":
        show_menu()
    elif args.command == "serve":
        serve(host=args.host, port=args.port, seed_demo_menu=args.seed_demo_menu, reload=args.reload)
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
