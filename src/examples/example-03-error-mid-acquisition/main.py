"""
Example 03: Error During Acquisition

If something raises halfway through acquiring resources, everything that was
already added is still closed, in reverse order, before the error propagates.
Errors raised by close() itself are ignored.
"""

from closeable_ledger import ResourceLedger, close_quietly


class Handle:
    """Fake resource whose close() can fail."""

    def __init__(self, name, fail_on_close=False):
        self.name = name
        self.fail_on_close = fail_on_close
        print(f"  open  {self.name}")

    def close(self):
        print(f"  close {self.name}")
        if self.fail_on_close:
            raise OSError(f"{self.name} refused to close")


if __name__ == "__main__":
    print("Acquisition fails on the third resource:")

    try:
        with ResourceLedger() as ledger:
            ledger.add(Handle("socket"))
            ledger.add(Handle("lock", fail_on_close=True))
            raise ConnectionError("could not open the third resource")
    except ConnectionError as e:
        print(f"  caught: {e}")

    print("\nclose_quietly() closes in the order given, skipping None:")
    close_quietly(Handle("a"), None, Handle("b", fail_on_close=True), Handle("c"))

    print("\n✅ Cleanup always runs to completion")
