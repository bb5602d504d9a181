"""Each call restarts the prime search from the latest yield."""

import itertools

from resumable_generators import resumable


@resumable
def primes(yield_):
    # primes discovered so far
    found = []
    for current in itertools.count(2):
        # only primes up to sqrt(current) need checking
        smaller = itertools.takewhile(lambda p: p * p <= current, found)
        if all(current % p for p in smaller):
            found.append(current)
            yield_(current)


def main():
    with primes() as gen:
        print(" ".join(str(gen()) for _ in range(10)))


if __name__ == "__main__":
    main()
