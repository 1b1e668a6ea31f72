"""CLI adapter expanding a recurring payable into future instances."""

import os
import sys

from src.application.use_cases.expand_recurrence import (
    ExpandPayableRecurrenceUseCase,
)
from src.infrastructure.container import build_record_store, build_settings
from src.infrastructure.logging.logger import (
    get_app_logger,
    get_usage_logger,
)


def main(argv: list[str] | None = None) -> None:
    """Expand the payable named on the command line or in the environment.

    Args:
        argv: Optional arguments; the first one is the payable id. Falls
            back to ``RECURRENCE_PAYABLE_ID``.
    """
    logger = get_app_logger()
    args = sys.argv[1:] if argv is None else argv
    payable_id = args[0] if args else os.getenv("RECURRENCE_PAYABLE_ID")
    if not payable_id:
        logger.warning(
            "A payable id is required (argument or RECURRENCE_PAYABLE_ID)."
        )
        return
    get_usage_logger().info(f"expand_recurrence payable={payable_id}")

    use_case = ExpandPayableRecurrenceUseCase(
        build_record_store(),
        logger=logger,
        settings=build_settings(),
    )
    expansion = use_case.execute_by_id(payable_id)
    if expansion is None:
        print(f"Payable {payable_id} not found.")
        return

    print(
        f"Created {len(expansion.instances)} instances for payable "
        f"{payable_id} (group {expansion.group_id}, "
        f"through {expansion.expanded_through})."
    )


if __name__ == "__main__":  # pragma: no cover
    main()
