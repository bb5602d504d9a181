"""Feed numbers into a paused body and read back the running average."""

from resumable_generators import resumable


@resumable
def averager(yield_, label):
    total = 0.0
    count = 0
    value = yield_("%s ready" % label)
    while value is not None:
        total += value
        count += 1
        value = yield_(total / count)
    return "%s: %d values" % (label, count)


def main():
    gen = averager()
    print(gen("temperature"))
    for reading in [10, 20, 60]:
        print(gen(reading))
    print(gen())
    print(gen.state.name)


if __name__ == "__main__":
    main()
