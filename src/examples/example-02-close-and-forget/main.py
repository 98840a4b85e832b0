"""
Example 02: close_and_forget()

A resource that is finished early can be closed right away and dropped from
the ledger, so it is not closed a second time at the end of the block.
"""

from closeable_ledger import ResourceLedger


class TempFile:
    """Fake resource that announces open and close."""

    def __init__(self, name):
        self.name = name
        print(f"  open  {self.name}")

    def close(self):
        print(f"  close {self.name}")


if __name__ == "__main__":
    with ResourceLedger() as ledger:
        log = ledger.add(TempFile("log"))
        for i in range(3):
            chunk = ledger.add(TempFile(f"chunk-{i}"))
            print(f"  ... processing chunk-{i}")
            ledger.close_and_forget(chunk)

        print(f"\nStill tracked: {len(ledger)}")

    print("\n✅ Each chunk was closed as soon as it was done, the log at the end")
