"""Elementary number theory: digits, factorials, GCD/LCM, palindromes and primes."""

from __future__ import annotations

import math


def _require_positive(**numbers: int) -> None:
    for name, value in numbers.items():
        if value <= 0:
            raise ValueError(f"{name} must be positive, got {value}")


def digit_count_log(num: int) -> int:
    """Count the decimal digits of a positive number using a logarithm."""
    _require_positive(num=num)
    return math.floor(math.log10(num) + 1)


def digit_count(num: int) -> int:
    """Count decimal digits by repeated division; zero has no digits."""
    num = abs(num)
    count = 0
    while num:
        num //= 10
        count += 1
    return count


def digit_count_recursive(num: int) -> int:
    """Count decimal digits recursively; zero has no digits."""
    num = abs(num)
    if num == 0:
        return 0
    return 1 + digit_count_recursive(num // 10)


def trailing_zeros_in_factorial(n: int) -> int:
    """Count the trailing zeros of n! by counting factors of five."""
    if n < 0:
        raise ValueError("n must not be negative")
    count = 0
    power = 5
    while power <= n:
        count += n // power
        power *= 5
    return count


def trailing_zeros_in_factorial_naive(n: int) -> int:
    """Count the trailing zeros of n! by computing it and stripping zeros."""
    value = factorial(n)
    count = 0
    while value % 10 == 0:
        value //= 10
        count += 1
    return count


def factorial(n: int) -> int:
    """Return n! computed with a loop."""
    if n < 0:
        raise ValueError("factorial is not defined for negative numbers")
    result = 1
    for factor in range(2, n + 1):
        result *= factor
    return result


def factorial_recursive(n: int) -> int:
    """Return n! computed recursively."""
    if n < 0:
        raise ValueError("factorial is not defined for negative numbers")
    if n <= 1:
        return 1
    return n * factorial_recursive(n - 1)


def gcd_naive(a: int, b: int) -> int:
    """Return the GCD of two positive numbers by trying every candidate downwards."""
    _require_positive(a=a, b=b)
    candidate = min(a, b)
    while a % candidate or b % candidate:
        candidate -= 1
    return candidate


def gcd_subtraction(a: int, b: int) -> int:
    """Return the GCD of two positive numbers by repeated subtraction."""
    _require_positive(a=a, b=b)
    while a != b:
        if a > b:
            a -= b
        else:
            b -= a
    return a


def gcd(a: int, b: int) -> int:
    """Return the GCD using the remainder form of Euclid's algorithm."""
    a, b = abs(a), abs(b)
    while b:
        a, b = b, a % b
    return a


def is_number_palindrome(num: int) -> bool:
    """Return True if the number's digits read the same in both directions."""
    original = abs(num)
    reversed_value = 0
    remaining = original
    while remaining:
        remaining, digit = divmod(remaining, 10)
        reversed_value = reversed_value * 10 + digit
    return reversed_value == original


def is_prime_naive(num: int) -> bool:
    """Return True if ``num`` is prime, trying every smaller divisor."""
    if num < 2:
        return False
    return all(num % divisor for divisor in range(2, num))


def is_prime(num: int) -> bool:
    """Return True if ``num`` is prime, trying divisors up to its square root."""
    if num < 2:
        return False
    divisor = 2
    while divisor * divisor <= num:
        if num % divisor == 0:
            return False
        divisor += 1
    return True


def is_prime_fast(num: int) -> bool:
    """Return True if ``num`` is prime, trying only divisors of the form 6k +/- 1."""
    if num < 2:
        return False
    if num in (2, 3):
        return True
    if num % 2 == 0 or num % 3 == 0:
        return False
    divisor = 5
    while divisor * divisor <= num:
        if num % divisor == 0 or num % (divisor + 2) == 0:
            return False
        divisor += 6
    return True


def lcm(a: int, b: int) -> int:
    """Return the LCM as a * b / gcd(a, b)."""
    if a == 0 or b == 0:
        return 0
    return abs(a * b) // gcd(a, b)


def lcm_naive(a: int, b: int) -> int:
    """Return the LCM of two positive numbers by counting up from the larger."""
    _require_positive(a=a, b=b)
    candidate = max(a, b)
    while candidate % a or candidate % b:
        candidate += 1
    return candidate