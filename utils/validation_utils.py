from typing import Union

from governance.exceptions import InvalidArgument, InvalidSupportValue


def parse_support(raw_support: Union[bool, str]) -> bool:
    """
    Normalizes a vote support value.

    Args:
        raw_support: True/False, or the strings "true"/"false" in any letter case.

    Raises:
        InvalidSupportValue: For anything else, e.g. "yes" or 1.
    """
    if raw_support is True or raw_support is False:
        return raw_support

    support = str(raw_support).lower()
    if support not in ("true", "false"):
        raise InvalidSupportValue(raw_support)
    return support == "true"


def validate_amount(amount: int, name: str = "amount") -> None:
    """
    Raises:
        InvalidArgument: If the token amount is negative.
    """
    if amount < 0:
        raise InvalidArgument(f"{name} must be greater than or equal to 0, got {amount}")
