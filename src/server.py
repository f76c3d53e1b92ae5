"""Protean Engine runner for the EShop domain.

Starts the Engine that processes events asynchronously when the domain runs
with event_processing = "async" (the production overlay), keeping the
OrderAdminView projection up to date.

Usage:
    python src/server.py
    python src/server.py --test-mode   # Drain pending events and exit
"""

import argparse
import asyncio

from protean.server.engine import Engine


def _get_domain():
    from eshop.domain import eshop

    eshop.init()
    return eshop


async def run(test_mode=False):
    engine = Engine(_get_domain(), test_mode=test_mode)
    await engine.run()


def main():
    parser = argparse.ArgumentParser(description="EShop Engine runner")
    parser.add_argument(
        "--test-mode",
        action="store_true",
        help="Process pending events once and exit",
    )
    args = parser.parse_args()

    asyncio.run(run(test_mode=args.test_mode))


if __name__ == "__main__":
    main()
