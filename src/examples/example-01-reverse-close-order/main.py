"""
Example 01: Reverse Close Order

Resources added to a ResourceLedger are closed last-added first when the
with block ends, just like nested with statements would close them.
"""

from closeable_ledger import ResourceLedger


class Connection:
    """Fake resource that announces open and close."""

    def __init__(self, name):
        self.name = name
        print(f"  open  {name}")

    def close(self):
        print(f"  close {self.name}")


if __name__ == "__main__":
    print("Acquiring three resources in sequence:")

    with ResourceLedger() as ledger:
        conn = ledger.add(Connection("connection"))
        stmt = ledger.add(Connection("statement"))
        rows = ledger.add(Connection("result set"))
        print(f"\nTracking {len(ledger)} resources, leaving the block...")

    print("\n✅ Closed in reverse order: result set, statement, connection")
