"""
Math modules для euler library

Числовые алгоритмы: большие числа, теория чисел, комбинаторика,
операции над цифрами, простые множители.
"""

# Guards
from src.euler.math.guards import (
    validate_digit_string,
    validate_non_negative_int,
    validate_positive_int,
)

# Big numbers
from src.euler.math.big import (
    PARTITION_SIGNS,
    continued_fraction,
    convergents,
    factorial,
    generalized_pentagonals,
    integer_partitions,
    precision_sqrt,
)

# Number theory
from src.euler.math.number_theory import (
    divisor_sum,
    divisor_sum_list,
    phis,
    sqrt_terms,
)

# Combinatorics
from src.euler.math.combinatorics import (
    accumulate,
    cartesian_product,
    k_nested,
    perms_with_reps,
    perms_without_reps,
    replicate,
)

# Digits
from src.euler.math.digits import (
    from_bytes,
    from_digits,
    is_palindrome,
    is_pandigital,
    is_perm,
    sum_of_digits,
    to_bytes,
    to_digits,
)

# Primes
from src.euler.math.primes import (
    prime_factor_cnt,
    prime_factors,
    prime_factors_unique,
    sopf,
)

__all__ = [
    # Guards
    "validate_digit_string",
    "validate_non_negative_int",
    "validate_positive_int",
    # Big numbers — Constants
    "PARTITION_SIGNS",
    # Big numbers — Functions
    "continued_fraction",
    "convergents",
    "factorial",
    "generalized_pentagonals",
    "integer_partitions",
    "precision_sqrt",
    # Number theory
    "divisor_sum",
    "divisor_sum_list",
    "phis",
    "sqrt_terms",
    # Combinatorics
    "accumulate",
    "cartesian_product",
    "k_nested",
    "perms_with_reps",
    "perms_without_reps",
    "replicate",
    # Digits
    "from_bytes",
    "from_digits",
    "is_palindrome",
    "is_pandigital",
    "is_perm",
    "sum_of_digits",
    "to_bytes",
    "to_digits",
    # Primes
    "prime_factor_cnt",
    "prime_factors",
    "prime_factors_unique",
    "sopf",
]
