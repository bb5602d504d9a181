"""Closing a suspended generator runs the body's finally block."""

import logging

from resumable_generators import GeneratorExhausted, resumable


@resumable
def worker(yield_, name):
    print("open", name)
    try:
        while True:
            yield_(name)
    finally:
        print("release", name)


def main():
    logging.basicConfig(level=logging.WARNING)

    gen = worker()
    print(gen("job-1"))
    print(gen())
    gen.close()
    print(gen.state.name)

    try:
        gen()
    except GeneratorExhausted:
        print("exhausted")


if __name__ == "__main__":
    main()
