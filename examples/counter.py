"""Two counters built from one definition advance independently."""

from resumable_generators import construct


def counting(yield_):
    def body(start=0):
        i = start
        while True:
            yield_(i)
            i += 1

    return body


def main():
    a = construct(counting)
    b = construct(counting)

    for _ in range(3):
        print("a", a())
    print("b", b(10))
    print("a", a())
    print("b", b())

    a.close()
    b.close()


if __name__ == "__main__":
    main()
