"""Interactive calculator units that prompt on a console and print results."""

from __future__ import annotations

from . import mathops
from .console import Console


def _read_pair(console: Console) -> tuple[int, int]:
    console.write("Enter a and b: ")
    return console.read_int(), console.read_int()


def arithmetic_unit(console: Console) -> None:
    """Add or subtract two integers."""
    console.write("Enter operation (add, sub): ")
    op = console.read_token()
    a, b = _read_pair(console)
    try:
        console.write(f"Result: {mathops.arithmetic(op, a, b)}\n")
    except mathops.UnknownOperation:
        console.write("Unknown operation\n")


def logic_unit(console: Console) -> None:
    """Apply a bitwise operation to one or two integers."""
    console.write("Enter operation (and, or, not, xor): ")
    op = console.read_token()
    if op == "not":
        console.write("Enter a: ")
        a = console.read_int()
        console.write(f"Result: {mathops.bit_not(a)}\n")
        return
    a, b = _read_pair(console)
    try:
        console.write(f"Result: {mathops.logic(op, a, b)}\n")
    except mathops.UnknownOperation:
        console.write("Unknown operation\n")


def mult_div_unit(console: Console) -> None:
    """Multiply or divide two integers."""
    console.write("Enter operation (mult, div): ")
    op = console.read_token()
    a, b = _read_pair(console)
    try:
        console.write(f"Result: {mathops.mult_div(op, a, b)}\n")
    except ZeroDivisionError:
        console.write("Error: Division by zero\n")
    except mathops.UnknownOperation:
        console.write("Unknown operation\n")


def functions_unit(console: Console) -> None:
    """Evaluate sine, cosine or tangent of a value."""
    console.write("Choose function (1: sin, 2: cos, 3: tan): ")
    choice = console.read_int()
    console.write("Enter value: ")
    value = console.read_float()
    try:
        console.write(f"Result: {mathops.trig(choice, value):f}\n")
    except mathops.UnknownOperation:
        console.write("Unknown function\n")


def gcd_lcm_unit(console: Console) -> None:
    """Compute the GCD or LCM of two integers.

    The LCM of zero and zero raises ZeroDivisionError.
    """
    console.write("Enter operation (gcd, lcm): ")
    op = console.read_token()
    a, b = _read_pair(console)
    if op == "gcd":
        console.write(f"GCD: {mathops.gcd(a, b)}\n")
    elif op == "lcm":
        console.write(f"LCM: {mathops.lcm(a, b)}\n")
    else:
        console.write("Unknown operation\n")


def permute_unit(console: Console) -> None:
    """Print every permutation of a list of integers, one per line."""
    console.write("Enter number of elements: ")
    count = console.read_int()
    console.write("Enter elements: ")
    items = [console.read_int() for _ in range(max(count, 0))]
    console.write("Permutations:\n")
    for perm in mathops.permutations(items):
        console.write("".join(f"{value} " for value in perm) + "\n")


def prob_unit(console: Console) -> None:
    """Compute the probability of an event from occurrences and total outcomes."""
    console.write("Ingrese el numero de ocurrencias del evento: ")
    occurrences = console.read_int()
    console.write("Ingrese el numero total de resultados posibles: ")
    total = console.read_int()
    result = mathops.probability(occurrences, total)
    console.write(f"La probabilidad del evento es: {result:f}\n")