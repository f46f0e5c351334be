"""Walk through the linked list operations, printing each step."""

from __future__ import annotations

import sys
from typing import Optional, Sequence, TextIO

from chainlist.linked_list import LinkedList


def _show(lst: LinkedList, out: TextIO) -> None:
    out.write(f"\n{lst}\n\n")


def run_demo(out: TextIO) -> None:
    """Write the demonstration transcript to out."""
    lst = LinkedList()

    out.write(f"\nINITIAL SIZE: {len(lst)}")
    _show(lst, out)

    out.write("\n\n== INSERTING NODES ==")
    lst.append(34)
    lst.insert_first(4)
    lst.insert_first(1)
    lst.append(11)
    lst.insert_first(-26)
    lst.append(64)
    lst.insert_first(96)

    out.write(f"\nSIZE AFTER INSERTING: {len(lst)}")
    _show(lst, out)

    out.write("\n\n== INSERTING NODES AT POSITIONS ==")
    for value, position in ((44, 2), (85, 0), (101, 9), (85, -1), (85, 12)):
        try:
            lst.insert(position, value)
        except IndexError as error:
            out.write(f"\nERROR: {error}")

    out.write("\n\n== LIST AFTER POSITIONAL INSERTS ==")
    _show(lst, out)

    out.write(f"\nFIRST ELEMENT: {lst.first()}")
    out.write(f"\nLAST ELEMENT: {lst.last()}")
    out.write(f"\nELEMENT AT POSITION 3: {lst[3]}\n")

    out.write(f"\nPOP FIRST: {lst.pop_first()}")
    out.write(f"\nPOP LAST: {lst.pop_last()}")
    out.write(f"\nPOP POSITION 2: {lst.pop(2)}")

    out.write("\n\n== LIST AFTER REMOVING NODES ==")
    _show(lst, out)

    out.write(f"\nSEARCHING FOR 4, POSITION: {lst.find(4)}")
    out.write(f"\nSEARCHING FOR 99, POSITION: {lst.find(99)}")

    out.write("\n\nORIGINAL LIST:")
    _show(lst, out)

    out.write("\nSORTING LIST...")
    lst.sort()
    _show(lst, out)

    out.write("\nINSERTING 50 IN ORDER")
    lst.insert_sorted(50)
    _show(lst, out)

    out.write("\nCOPYING THE LIST")
    duplicate = lst.copy()
    _show(duplicate, out)

    out.write("\nRELEASING LISTS...")
    lst.clear()
    duplicate.clear()
    out.write("\n\nLISTS RELEASED.")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the demonstration on standard output."""
    run_demo(sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())