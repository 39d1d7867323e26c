"""Identifier generation for discovered assets.

Asset names are turned into identifiers that are valid in generated
source code and unique for the lifetime of a ``known_funcs`` mapping.
"""

import string

# Characters that may appear in an identifier once the name is lower-cased
VALID_IDENTIFIER_CHARS = frozenset(string.ascii_lowercase + string.digits + "_")


def safe_function_name(name: str, known_funcs: dict[str, int]) -> str:
    """Convert an asset name into a unique, valid identifier.

    Invalid characters are dropped and the next valid character is
    upper-cased, so "css/main-theme.css" becomes "cssMainThemeCss".
    Repeated identifiers receive a numeric suffix starting at 2.

    Args:
        name: Logical asset name
        known_funcs: Identifiers handed out so far, mapped to the next
            suffix to use. Updated in place.

    Returns:
        Identifier that has not been returned before for this mapping
    """
    chars: list[str] = []
    to_upper = False

    for char in name.lower():
        if char not in VALID_IDENTIFIER_CHARS:
            to_upper = True
        elif to_upper:
            chars.append(char.upper())
            to_upper = False
        else:
            chars.append(char)

    func = "".join(chars) or "_"

    # Identifiers can't start with a digit
    if func[0].isdigit():
        func = "_" + func

    if func in known_funcs:
        num = known_funcs[func]
        # A suffixed name may already be taken by a bare one ("a.txt2")
        while f"{func}{num}" in known_funcs:
            num += 1
        known_funcs[func] = num + 1
        func = f"{func}{num}"

    known_funcs[func] = 2
    return func
