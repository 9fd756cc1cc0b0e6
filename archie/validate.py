# archie/validate.py

from archie.utils.errors import InvalidPackageName

MAX_INPUT = 512
FORBIDDEN = frozenset(";&|`$()<>\"'\\")
LEADING_EXTRA = frozenset("-_+")


def check_package_name(name: str) -> str:
    """
    Return `name` unchanged, or raise InvalidPackageName saying why not.

    This is a denylist for the usual shell metacharacters. Whitespace is
    allowed, several names may be given at once.
    """
    if not name:
        raise InvalidPackageName("Package name is empty")
    if len(name) > MAX_INPUT:
        raise InvalidPackageName(
            f"Package name too long ({len(name)} > {MAX_INPUT} characters)"
        )
    bad = sorted(set(name) & FORBIDDEN)
    if bad:
        raise InvalidPackageName(
            f"Invalid package name: forbidden character {bad[0]!r}"
        )
    first = name[0]
    if not (first.isascii() and first.isalnum()) and first not in LEADING_EXTRA:
        raise InvalidPackageName(
            f"Invalid package name: may not start with {first!r}"
        )
    return name


def is_valid_package_name(name: str) -> bool:
    try:
        check_package_name(name)
    except InvalidPackageName:
        return False
    return True
