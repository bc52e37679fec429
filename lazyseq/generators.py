"""
Infinite number sequences and pattern based sequences built purely from the sequence combinators.
"""
from lazyseq.constructors import ALL, iterate, repeat, unfold, walk
from lazyseq.maybe import Just, NOTHING, choice_maybe
from lazyseq.operators import cycle, drop, map_, pipe, take, zip_with
from lazyseq.pipeline import create_sequence
from lazyseq.terminal import reduce_


def prime_number_sequence():
    """
    Infinite sequence of prime numbers.

    The sieve keeps one running sequence of Maybes, one element per upcoming candidate. Every prime
    found adds its own cycled pattern (NOTHING, ..., Just(prime)) to it, so the running sequence
    holds a Just exactly at the multiples of the primes found so far. Each prime adds one level of
    nested iterators, which makes this suitable for the first few hundred primes.

    >>> list(prime_number_sequence().take(5))
    [2, 3, 5, 7, 11]

    :return: Sequence of primes
    """
    def pattern_for_prime(prime):
        return pipe(
            map_(lambda x: Just(prime) if x == prime else NOTHING),
            cycle,
        )(walk(1, prime))

    def combine(previous, current):
        return choice_maybe(previous)(current)

    def prime_number_iterator():
        previous_primes = iter(cycle([NOTHING]))
        for candidate in walk(2, ALL):
            if next(previous_primes).is_just():
                continue
            # the running pattern continues where it stopped, aligned with candidate + 1
            resumed = _resume(previous_primes)
            previous_primes = iter(zip_with(combine)(resumed)(pattern_for_prime(candidate)))
            yield candidate

    return create_sequence(prime_number_iterator)


def _resume(iterator):
    return create_sequence(lambda: iterator)


def fibonacci_sequence():
    """
    Infinite sequence of Fibonacci numbers.

    >>> list(fibonacci_sequence().take(7))
    [1, 1, 2, 3, 5, 8, 13]
    """
    return unfold((1, 1), lambda state: ((state[1], state[0] + state[1]), state[0]))


def fizzbuzz(rules, lower=1, upper=30):
    """
    Generalised FizzBuzz. Every rule (number, text) contributes its text to all multiples of number;
    numbers without any text are rendered as they are.

    >>> list(fizzbuzz([(3, "Fizz"), (5, "Buzz")], 9, 15))
    ['Fizz', 'Buzz', '11', 'Fizz', '13', '14', 'FizzBuzz']

    :param rules: iterable of (number, text) pairs, read once per call
    :param lower: first number of the result
    :param upper: last number of the result
    :return: Sequence of strings
    """
    natural_numbers = iterate(1, lambda i: i + 1)

    def pattern_for_rule(rule):
        number, text = rule
        return pipe(
            map_(lambda i: text if i == number else ""),
            take(number),
            cycle,
        )(natural_numbers)

    patterns = [pattern_for_rule(rule) for rule in rules]
    base_line = repeat("")

    return pipe(
        reduce_(lambda acc, cur: zip_with(lambda a, b: a + b)(acc)(cur), base_line),
        zip_with(lambda number, pattern: pattern if pattern else str(number))(natural_numbers),
        take(upper),
        drop(lower - 1),
    )(patterns)
