"""Integer limits, overflow-checked arithmetic and buffer-growth helpers."""

__all__ = [
    "maxof",
    "mult_is_overflow",
    "add_is_overflow",
    "st_mult",
    "st_add",
    "align_down",
    "align_up",
    "lgrow",
    "sgrow",
]


def maxof(bits, signed=False):
    """Return the largest value an integer of ``bits`` width can hold."""
    if bits <= 0:
        raise ValueError(f"integer width must be positive, not {bits}")
    if signed:
        return (1 << (bits - 1)) - 1
    return (1 << bits) - 1


def _check_operands(a, b):
    if a < 0 or b < 0:
        raise ValueError(f"operands must not be negative: {a}, {b}")


def mult_is_overflow(a, b, bits=64):
    """Tell whether ``a * b`` exceeds an unsigned ``bits``-wide integer."""
    _check_operands(a, b)
    return bool(a) and b > maxof(bits) // a


def add_is_overflow(a, b, bits=64):
    """Tell whether ``a + b`` exceeds an unsigned ``bits``-wide integer."""
    _check_operands(a, b)
    return b > maxof(bits) - a


def st_mult(a, b, bits=64):
    """Multiply, raising OverflowError when the product does not fit."""
    if mult_is_overflow(a, b, bits):
        raise OverflowError(f"{a} * {b} overflows in {bits // 8}-byte")
    return a * b


def st_add(a, b, bits=64):
    """Add, raising OverflowError when the sum does not fit."""
    if add_is_overflow(a, b, bits):
        raise OverflowError(f"{a} + {b} overflows in {bits // 8}-byte")
    return a + b


def _check_alignment(n):
    if n < 2 or n & (n - 1):
        raise ValueError(
            f"alignment must be a power of two greater than 1, not {n}"
        )


def align_down(m, n):
    """Round ``m`` down to a multiple of ``n``."""
    _check_alignment(n)
    return m & ~(n - 1)


def align_up(m, n):
    """Round ``m`` up to a multiple of ``n``."""
    _check_alignment(n)
    return (m + n - 1) & ~(n - 1)


def lgrow(x):
    """Next capacity for a growing buffer length."""
    return align_down(((x + 8) * 3) >> 1, 8)


def sgrow(x):
    """Next capacity for a growing array size."""
    return align_down(x + (x >> 3) + 6, 8)