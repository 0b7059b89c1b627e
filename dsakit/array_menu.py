"""An interactive, menu-driven integer array with insertion and deletion."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Callable, TextIO

_MENU = (
    "\nchoose the options : \n\n"
    "press 1 for insertion \n"
    "press 2 for deletion \n"
    "press 3 to display array elements \n"
    "press 0 to exit \n"
)
_BAD_INDEX = "Index not found enter valid Index position "


@dataclass
class ArrayList:
    """A growable list of integers addressed by position."""

    items: list[int] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[int]:
        return iter(self.items)

    def insert(self, index: int, key: int) -> None:
        """Place ``key`` at ``index``; ``index`` may equal the length."""
        if not 0 <= index <= len(self.items):
            raise IndexError(f"index {index} outside 0..{len(self.items)}")
        self.items.insert(index, key)

    def remove_key(self, key: int) -> bool:
        """Remove the first occurrence of ``key``; tell whether one was found."""
        try:
            self.items.remove(key)
        except ValueError:
            return False
        return True

    def remove_at(self, index: int) -> int:
        """Remove and return the element at ``index``."""
        if not 0 <= index < len(self.items):
            raise IndexError(f"index {index} outside 0..{len(self.items) - 1}")
        return self.items.pop(index)

    def render(self) -> str:
        """Text listing each element with its index."""
        if not self.items:
            return "array is empty :\n"
        lines = "".join(f"at Index :{i}={value}\n" for i, value in enumerate(self.items))
        return lines + "\n\n"


def _tokens(stream: Iterable[str]) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _next_int(tokens: Iterator[str]) -> int:
    try:
        return int(next(tokens))
    except (StopIteration, ValueError):
        raise EOFError from None


def _delete(array: ArrayList, tokens: Iterator[str], write: Callable[[str], object]) -> None:
    write("press 1 if you want to delete the element  by location :\n\n")
    write("press 2 if you want to delete the element  by key :\n\n")
    choice = _next_int(tokens)
    if choice == 1:
        write("enter the Index position which you want to delete :  ")
        index = _next_int(tokens)
        write("\n\n")
        try:
            array.remove_at(index)
        except IndexError:
            write(_BAD_INDEX)
        else:
            write("Element deleted successfully :----- \n")
            write("\n\n")
    elif choice == 2:
        write("Enter the key value which you want to delete :  ")
        key = _next_int(tokens)
        if array.remove_key(key):
            write("\nkey Matched :\n")
            write("\nElement deleted successfully :----- \n")
        else:
            write("key not found :\n")
        write("\n")
    else:
        write("enter valid option ")


def _dispatch(
    option: int, array: ArrayList, tokens: Iterator[str], write: Callable[[str], object]
) -> None:
    if option == 1:
        write("Enter the key value which you want to insert in Array : ")
        key = _next_int(tokens)
        write("\n")
        write("Enter the Index position where you want to insert : ")
        index = _next_int(tokens)
        try:
            array.insert(index, key)
        except IndexError:
            write(_BAD_INDEX)
        else:
            write("\n\n")
    elif option == 2:
        _delete(array, tokens, write)
    elif option == 3:
        write("display array elements :\n")
        write(array.render())
    else:
        write("pls enter valid option :\n")


def run_menu(stdin: TextIO, stdout: TextIO) -> ArrayList:
    """Drive the menu from ``stdin`` until option 0 or end of input.

    Returns the array as it stands when the menu ends.
    """
    tokens = _tokens(stdin)
    write = stdout.write
    array = ArrayList()
    try:
        write("Enter size of array : ")
        size = _next_int(tokens)
        write("enter the elements of array : ")
        array.items.extend(_next_int(tokens) for _ in range(size))
        write("\n")
        write("array elements are :  " + "".join(f"{v}  " for v in array) + "\n\n")
        while True:
            write(_MENU)
            option = _next_int(tokens)
            _dispatch(option, array, tokens, write)
            if option == 0:
                break
    except EOFError:
        pass
    write("program end")
    return array


def main(argv: list[str] | None = None) -> int:
    """Run the menu on standard input and output."""
    run_menu(sys.stdin, sys.stdout)
    sys.stdout.write("\n")
    return 0