from enum import Enum

from .ruleset import DEFAULT_RULES


CODE_LENGTH = DEFAULT_RULES["code_length"]


class InvalidCodeError(ValueError):
    """Raised when a code has the wrong length or unknown colors."""


class CodePeg(Enum):
    """A single colored peg of a code."""

    A = "A"
    B = "B"
    C = "C"
    D = "D"
    E = "E"
    F = "F"


def check_rules(rules):
    """
    Make sure a ruleset describes the codes this package can build.

    Args:
        rules (dict): The ruleset to check.
    Returns:
        dict: The same ruleset.
    Raises:
        ValueError: If code length or color set differ from DEFAULT_RULES.
    """
    for key in ("code_length", "colors"):
        if rules.get(key) != DEFAULT_RULES[key]:
            raise ValueError(
                f"Unsupported ruleset: '{key}' must be {DEFAULT_RULES[key]}, "
                f"but got {rules.get(key)}."
            )
    return rules


def normalize(sequence):
    """
    Turn a code given as string or iterable into a list of color symbols.

    Args:
        sequence (str | Iterable[CodePeg | str]): e.g. "ab cd" or
        [CodePeg.A, "b", ...].
    Returns:
        list[str]: Upper-case symbols, e.g. ["A", "B", "C", "D"].
    """
    if isinstance(sequence, str):
        sequence = sequence.replace(" ", "")
    return [
        item.value if isinstance(item, CodePeg) else str(item).upper()
        for item in sequence
    ]


def validate_sequence(symbols, strict: bool = True) -> bool:
    """
    Validate a list of color symbols (length, colors).

    Args:
        symbols (list[str]): Normalized symbols, see normalize().
        strict (bool): If True, raise InvalidCodeError with an explanatory
        message when validation fails. If False, return False on failure.

    Returns:
        bool: True if the symbols form a valid code; False if invalid and
        strict is False.
    """

    def fail(msg: str) -> bool:
        """
        Handle failure depending on strict mode.

        Args:
            msg (str): The error message.

        Returns:
            bool: Always False.
        """
        if strict:
            raise InvalidCodeError(msg)
        return False

    # Validates, if code sequence length is as declared in the rules.
    if len(symbols) != CODE_LENGTH:
        return fail(
            f"Code length must be {CODE_LENGTH}, but got {len(symbols)}."
        )

    # Validates if code sequence only contains colors as in the rules.
    for color in symbols:
        if color not in DEFAULT_RULES["colors"]:
            allowed = ", ".join(DEFAULT_RULES["colors"])
            return fail(f"Invalid color '{color}'. Allowed: {allowed}.")

    return True


class Code:
    """
        Represents a fixed-length sequence of pegs, either the secret or a
        guess. Immutable; copies share the same pegs.
    Attributes:
        pegs (tuple[CodePeg, ...]): The pegs in position order.
    """

    __slots__ = ("_pegs",)

    def __init__(self, sequence):
        """
        Initialize a Code instance.

        Args:
            sequence (str | Iterable[CodePeg | str]): The pegs of the code,
            either as CodePeg members or as color symbols ("ABCD").

        Raises:
            InvalidCodeError: If the sequence has the wrong length or holds
            an unknown color.
        """
        symbols = normalize(sequence)
        validate_sequence(symbols)
        object.__setattr__(self, "_pegs", tuple(CodePeg(s) for s in symbols))

    def __setattr__(self, name, value):
        raise AttributeError("Code is immutable")

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    def __reduce__(self):
        return (Code, (self.as_string(),))

    @property
    def pegs(self):
        return self._pegs

    def validate(self, strict: bool = True) -> bool:
        """
        Validate the current code (length, colors).

        Args:
            strict (bool): If True, raise InvalidCodeError when validation
            fails. If False, return False on failure.

        Returns:
            bool: True if the code is valid.
        """
        return validate_sequence(normalize(self._pegs), strict=strict)

    def as_string(self):
        """
        Return a string representation of the code (e.g. 'ABCD').
        Returns:
            str: The code as a string.
        """
        return "".join(peg.value for peg in self._pegs)

    def __len__(self):
        return len(self._pegs)

    def __iter__(self):
        return iter(self._pegs)

    def __getitem__(self, index):
        return self._pegs[index]

    def __eq__(self, other):
        if isinstance(other, Code):
            return self._pegs == other._pegs
        return NotImplemented

    def __hash__(self):
        return hash(self._pegs)

    def __repr__(self):
        return f"Code('{self.as_string()}')"

    def __str__(self):
        return self.as_string()
