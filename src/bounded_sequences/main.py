"""Main entry point for the bounded sequences demo."""

import asyncio
import logging
import sys

from .config import DemoConfig, get_demo_config
from .consumer import consume_async, consume_sync
from .sequences import (
    AsyncCounterIterable,
    CounterIterable,
    async_counter_literal,
    counter_literal,
)

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False):
    """Configure logging level.

    Args:
        verbose: Enable verbose logging
    """
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)
    else:
        logging.getLogger().setLevel(logging.INFO)


async def run_demo(config: DemoConfig) -> int:
    """Run the four demonstration consumers.

    The async consumers are scheduled first, but the sync consumers never
    suspend, so their output always comes out before any async output.

    Args:
        config: Demo configuration

    Returns:
        Total number of values observed
    """
    async_tasks = [
        asyncio.create_task(
            consume_async(async_counter_literal(config.bound), "async object literal")
        ),
        asyncio.create_task(
            consume_async(AsyncCounterIterable(config.bound), "async class")
        ),
    ]

    try:
        total = consume_sync(counter_literal(config.bound), "object literal")
        total += consume_sync(CounterIterable(config.bound), "class")
    except Exception:
        # Let the scheduled async consumers finish before propagating
        await asyncio.gather(*async_tasks, return_exceptions=True)
        raise

    for count in await asyncio.gather(*async_tasks):
        total += count

    return total


def main():
    """Main execution function."""
    try:
        config = get_demo_config()
        setup_logging(config.verbose)

        logger.debug(f"Iteration bound: {config.bound}")

        total = asyncio.run(run_demo(config))

        logger.debug(f"Observed {total} values in total")
        return 0

    except KeyboardInterrupt:
        logger.warning("Execution interrupted by user")
        return 130
    except Exception as e:
        logger.error(f"Error during execution: {e}", exc_info=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
