"""
Maybe basics: construction, chaining, matching and extraction.

Run: python examples/maybe_basics.py
"""
from maybepy import (
    Maybe,
    EmptyValueError,
    nothing,
    just,
    to_maybe,
    merge,
    from_either,
    left,
    right,
)


PORTS = {"http": 80, "https": 443}


def lookup_port(scheme: str) -> Maybe[int]:
    return just(PORTS[scheme]) if scheme in PORTS else nothing(int)


def main():
    # Chain lookups: bind flattens, map transforms
    url = just("https").bind(lookup_port).map(lambda p: f"example.com:{p}")
    print("url =>", url)                                   # Just('example.com:443')
    print("missing =>", just("ftp").bind(lookup_port))     # Nothing

    # Exhaustive two-branch dispatch
    for scheme in ("http", "gopher"):
        msg = lookup_port(scheme).match(lambda p: f"{scheme} uses {p}", lambda: f"{scheme} unknown")
        print(msg)

    # Combine two optional values
    merge(lookup_port("http"), lookup_port("https")).do_pair(
        lambda a, b: print("both ports =>", a, b)
    )

    # to_maybe treats a type's default as absent
    print("to_maybe(0) =>", to_maybe(0), "to_maybe(8080) =>", to_maybe(8080))

    # Extraction: silent default vs. explicit failure
    print("from_just =>", lookup_port("gopher").from_just())   # 0
    try:
        lookup_port("gopher").from_just_or_fail()
    except EmptyValueError as e:
        print("from_just_or_fail =>", e)

    # Either interop keeps the left alternative only
    print(from_either(left(1)), from_either(right("ignored")))


if __name__ == "__main__":
    main()
