"""Helpers shared by CLI commands: filter flags, deadlines and error reporting."""

import json
from typing import Optional, Tuple

from deadline import Deadline
from dto import parse
from dto.filter import FilterQuery
from errors import (
    AlreadyExistsError,
    InvalidInputError,
    NotFoundError,
    OperationCancelledError,
    SalesTrackerError,
)
from models.filter import ItemFilter

EXIT_STORAGE = 1
EXIT_INVALID_INPUT = 2
EXIT_NOT_FOUND = 3
EXIT_ALREADY_EXISTS = 4
EXIT_INTERRUPTED = 5


def add_filter_arguments(parser) -> None:
    """Add --from, --to, --category-id and --type to ``parser``."""
    parser.add_argument("--from", dest="date_from", help="Earliest date (YYYY-MM-DD)")
    parser.add_argument("--to", dest="date_to", help="Latest date (YYYY-MM-DD)")
    parser.add_argument("--category-id", help="Only items in this category")
    parser.add_argument("--type", dest="item_type", help="Only items of this type")


def add_timeout_argument(parser) -> None:
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Give up after this many seconds (default: configured query_timeout)",
    )


def filter_from_args(args) -> ItemFilter:
    """Build an ItemFilter from parsed filter flags.

    Raises:
        InvalidInputError: If a flag value is malformed.
    """
    query = parse(
        FilterQuery,
        {
            "from": args.date_from,
            "to": args.date_to,
            "category_id": args.category_id,
            "type": args.item_type,
        },
    )
    return query.to_filter()


def deadline_from_args(args) -> Optional[Deadline]:
    timeout = getattr(args, "timeout", None)
    if timeout is None:
        return None
    if timeout <= 0:
        raise InvalidInputError("--timeout must be positive")
    return Deadline.after(timeout)


def describe_error(error: SalesTrackerError) -> Tuple[int, str]:
    """Map a classified error to an exit code and a user-safe message.

    Storage failures are reported generically; their detail belongs in the log.
    """
    if isinstance(error, InvalidInputError):
        return EXIT_INVALID_INPUT, f"invalid input: {error.message}"
    if isinstance(error, NotFoundError):
        return EXIT_NOT_FOUND, error.message
    if isinstance(error, AlreadyExistsError):
        return EXIT_ALREADY_EXISTS, error.message
    if isinstance(error, OperationCancelledError):
        return EXIT_INTERRUPTED, error.message
    return EXIT_STORAGE, "internal storage error, try again later"


def print_json(payload) -> None:
    """Print a pydantic model, or a list of them, as JSON."""
    if isinstance(payload, list):
        print(json.dumps([entry.model_dump(mode="json") for entry in payload], indent=2))
    else:
        print(payload.model_dump_json(indent=2))
