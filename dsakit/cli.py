"""Interactive sessions and demos driving the data structures and sorts."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator
from typing import Any, TextIO

from dsakit.bst import BinarySearchTree
from dsakit.queues import CircularQueue, LinearQueue, QueueOverflow, QueueUnderflow
from dsakit.sorting import (
    average_mark,
    bubble_sort,
    insertion_sort,
    marks_above_average,
    merge_sort,
    quick_sort,
    selection_sort,
    sort_string,
)
from dsakit.stack import Stack, StackOverflow, StackUnderflow

QUEUE_KINDS = ("circular", "linear")
ALGORITHMS = ("bubble", "insertion", "selection", "merge", "quick", "string")


def _tokens(lines: Iterable[str]) -> Iterator[str]:
    return (token for line in lines for token in line.split())


def _word(tokens: Iterator[str]) -> str:
    try:
        return next(tokens)
    except StopIteration:
        raise ValueError("unexpected end of input") from None


def _integer(tokens: Iterator[str]) -> int:
    token = _word(tokens)
    try:
        return int(token)
    except ValueError:
        raise ValueError(f"expected an integer, got {token!r}") from None


def _count(tokens: Iterator[str], limit: int | None = None) -> int:
    number = _integer(tokens)
    if number < 0:
        raise ValueError(f"count must not be negative, got {number}")
    if limit is not None and number > limit:
        raise ValueError(f"at most {limit} elements are supported, got {number}")
    return number


def _format(values: Iterable[Any]) -> str:
    return "".join(f"{value} " for value in values)


def run_bst_session(lines: Iterable[str], out: TextIO | None = None) -> BinarySearchTree:
    """Build a tree from input, then search, delete and report on it."""
    out = out or sys.stdout
    tokens = _tokens(lines)
    tree = BinarySearchTree()

    out.write("Enter Number of Nodes: ")
    for index in range(1, _count(tokens) + 1):
        out.write(f"Enter Node {index} value : ")
        tree.insert(_integer(tokens))

    out.write(f"\nInorder Traversal: {_format(tree.in_order())}\n")
    out.write(f"\nPostorder Traversal: {_format(tree.post_order())}\n")
    out.write(f"\nPreorder Traversal: {_format(tree.pre_order())}\n\n")

    out.write("Enter value for search : ")
    wanted = _integer(tokens)
    out.write(f"Node with value {wanted} {'found' if wanted in tree else 'not found'}.\n\n")

    out.write("Enter value for delete : ")
    tree.delete(_integer(tokens))
    out.write(f"In-Order after deletion : {_format(tree.in_order())}\n")
    out.write(f"\nHeight of tree: {tree.height()}\n")
    out.write(f"Is tree balanced ? {'Yes' if tree.is_balanced() else 'No'}\n")
    out.write(f"Level Order Traversal: {_format(tree.level_order())}\n")
    return tree


def run_queue_demo(kind: str = "circular", out: TextIO | None = None) -> None:
    """Run the fixed enqueue/dequeue demonstration for a queue kind."""
    out = out or sys.stdout
    if kind not in QUEUE_KINDS:
        raise ValueError(f"unknown queue kind {kind!r}; choose from {', '.join(QUEUE_KINDS)}")
    queue = CircularQueue() if kind == "circular" else LinearQueue()

    def enqueue(value: int) -> None:
        try:
            queue.enqueue(value)
            out.write(f"Enqueued: {value}\n")
        except QueueOverflow as exc:
            out.write(f"{exc}\n")

    def dequeue() -> None:
        try:
            out.write(f"Dequeued: {queue.dequeue()}\n")
        except QueueUnderflow as exc:
            out.write(f"{exc}\n")

    def display() -> None:
        out.write(f"Queue contents: {_format(queue)}\n" if len(queue) else "Queue is empty.\n")

    for value in (10, 20, 30, 40, 50):
        enqueue(value)
    display()
    if kind == "circular":
        dequeue()
        dequeue()
        display()
        enqueue(60)
        enqueue(70)
        display()
        out.write(f"Front of the queue: {queue.peek()}\n")
    else:
        out.write(f"Front element: {queue.peek()}\n")
        dequeue()
        dequeue()
        display()
        enqueue(60)
        display()


def run_stack_session(lines: Iterable[str], out: TextIO | None = None) -> Stack:
    """Fill a stack from input, pop twice, and show it before and after."""
    out = out or sys.stdout
    tokens = _tokens(lines)
    stack = Stack()

    def display() -> None:
        if stack.is_empty():
            out.write("\nStack is empty.")
        out.write(f"\nThe content of stack are : {_format(stack)}")

    def pop() -> None:
        try:
            out.write(f"\nPopped : {stack.pop()}")
        except StackUnderflow as exc:
            out.write(f"\n{exc}")

    out.write(f"\nEnter the {stack.capacity} element to stack :\n")
    for _ in range(stack.capacity):
        try:
            stack.push(_integer(tokens))
        except StackOverflow as exc:
            out.write(f"\n{exc}")
    display()
    pop()
    pop()
    display()
    out.write("\n")
    return stack


def _read_values(tokens: Iterator[str], out: TextIO, prompt: str, header: str = "",
                 item_prompt: str = "", limit: int | None = None) -> list[int]:
    out.write(prompt)
    count = _count(tokens, limit)
    out.write(header)
    values = []
    for index in range(1, count + 1):
        out.write(item_prompt.format(index))
        values.append(_integer(tokens))
    return values


def run_sort_session(algorithm: str, lines: Iterable[str], out: TextIO | None = None) -> None:
    """Read values from input and show them before and after sorting."""
    if algorithm not in ALGORITHMS:
        raise ValueError(f"unknown algorithm {algorithm!r}; choose from {', '.join(ALGORITHMS)}")
    out = out or sys.stdout
    tokens = _tokens(lines)

    if algorithm == "string":
        out.write("Enter a String : ")
        out.write(f"Sorted String : {sort_string(_word(tokens))}\n")
    elif algorithm == "bubble":
        values = _read_values(tokens, out, "\nEnter No of Element : ", "\nEnter Array Element\n")
        out.write(f"Array Element before sort : {_format(values)}")
        ordered = bubble_sort(values)
        out.write(f"\nArray Element after sort : {_format(ordered)}")
        out.write(f"\nAverage Mark is : {average_mark(ordered):.2f}")
        out.write(f"\nMarks greater than average : {_format(marks_above_average(ordered))}\n")
    elif algorithm in ("insertion", "selection"):
        sort = insertion_sort if algorithm == "insertion" else selection_sort
        lead = "" if algorithm == "insertion" else "\n"
        values = _read_values(tokens, out, "Enter number of elements: ", "\nEnter array elements:\n")
        out.write(f"{lead}Array before sorting: {_format(values)}")
        ascending = sort(values)
        out.write(f"\nArray after ascending {algorithm} sort: {_format(ascending)}")
        descending = sort(ascending, descending=True)
        out.write(f"\nArray after descending {algorithm} sort: {_format(descending)}\n")
    elif algorithm == "merge":
        out.write("Merge sorting\n")
        values = _read_values(tokens, out, "Enter total no of element : ",
                              item_prompt="Enter {} element : ", limit=30)
        out.write(f"Before Merge sorted : {_format(values)}")
        out.write(f"\nAfter Merge sorted : {_format(merge_sort(values))}\n")
    else:
        out.write("Quick Sorting\n")
        values = _read_values(tokens, out, "Enter no of Element : ",
                              item_prompt="Enter {} element : ", limit=20)
        out.write(f"\nBefore Quick sorted : {_format(values)}")
        out.write(f"\nAfter Quick sorted : {_format(quick_sort(values))}\n")


def main(argv: list[str] | None = None) -> int:
    """Command-line entry point."""
    parser = argparse.ArgumentParser(prog="dsakit", description="Data structure and sorting sessions.")
    commands = parser.add_subparsers(dest="command", required=True)
    commands.add_parser("bst", help="build, search and prune a binary search tree")
    queue_parser = commands.add_parser("queue", help="run the queue demonstration")
    queue_parser.add_argument("kind", nargs="?", choices=QUEUE_KINDS, default="circular")
    commands.add_parser("stack", help="push five values, then pop two")
    sort_parser = commands.add_parser("sort", help="sort values read from input")
    sort_parser.add_argument("algorithm", choices=ALGORITHMS)
    args = parser.parse_args(argv)

    try:
        if args.command == "bst":
            run_bst_session(sys.stdin, sys.stdout)
        elif args.command == "queue":
            run_queue_demo(args.kind, sys.stdout)
        elif args.command == "stack":
            run_stack_session(sys.stdin, sys.stdout)
        else:
            run_sort_session(args.algorithm, sys.stdin, sys.stdout)
    except ValueError as exc:
        print(f"\nerror: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())