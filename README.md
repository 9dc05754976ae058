# ibmsim

An interactive console "computer" drawn as an old IBM terminal. At its prompt you
choose a unit, type an operation and its operands, and read the result.

## Install

```
pip install .
```

## Run

```
ibmsim
```

The main prompt accepts these commands:

| Command      | What it does                                              |
|--------------|-----------------------------------------------------------|
| `logic`      | Bitwise `and`, `or`, `xor` on two integers, `not` on one  |
| `arithmetic` | `add` or `sub` on two integers                            |
| `multdiv`    | `mult` or `div` (integer division truncating toward zero; division by zero is reported) |
| `function`   | `1` sin, `2` cos, `3` tan of a value in radians           |
| `gcd_lcm`    | `gcd` or `lcm` of two integers                            |
| `permute`    | Prints every permutation of the integers you enter        |
| `prob`       | Probability of an event: occurrences / possible outcomes (0 when there are no outcomes) |
| `exp`        | Opens the experimental menu                               |
| `exit`       | Leaves the simulator                                      |

Integer results behave like 32-bit signed machine integers, so overflow wraps around.
Input is read as whitespace-separated values, so several values may be typed on one line.

A session looks like this:

```
>>> arithmetic
Enter operation (add, sub): add
Enter a and b: 2 3
Result: 5
```

The simulator also stops at the end of input. If a number is expected and something
else is typed, or the LCM of 0 and 0 is asked for, it prints `error: ...` and exits
with status 1; Ctrl-C exits with status 130.

### Experimental menu

Typing `exp` opens a second prompt:

- `testing`: shows this machine's host name.
- `net`: opens a raw IPv4 socket and reports the source address of five captured packets.
  This usually needs administrator rights; without them the socket error is printed.
- `snake`: a 20×20 snake game in the terminal. Steer with `w`, `a`, `s`, `d`; after a
  game over press any key to play again or `R` to go back.
- `exit`: returns to the main prompt.

## Using the pieces from Python

The calculations live in `ibmsim.mathops` and can be used on their own:

```python
from ibmsim.mathops import gcd, lcm, mult_div, permutations, probability

gcd(12, 18)                 # 6
lcm(4, 6)                   # 12
mult_div("div", -7, 2)      # -3
probability(1, 4)           # 0.25
list(permutations([1, 2, 3]))
```

An unrecognised operation raises `ibmsim.mathops.UnknownOperation` (a `ValueError`);
`mult_div("div", a, 0)` raises `ZeroDivisionError`.

Other building blocks:

- `ibmsim.snake.SnakeGame` holds the game state with `turn(key)`, `step()`,
  `render()` and `score()`; it accepts a `random.Random` for reproducible food placement.
- `ibmsim.netscan.capture_sources(count, sock_factory)` yields the source addresses of
  captured packets and raises `ibmsim.netscan.CaptureError` on failure.
- `ibmsim.sysinfo.host_name()` returns the local host name.

The interactive units in `ibmsim.units` and the menus in `ibmsim.menu` read from and
write to an `ibmsim.console.Console`, which wraps any pair of text streams. That makes it
easy to drive a whole session from a script:

```python
import io
from ibmsim.console import Console
from ibmsim.menu import start_simulation

out = io.StringIO()
start_simulation(Console(io.StringIO("gcd_lcm gcd 12 18 exit"), out))
print(out.getvalue())
```

## Tests

```
pip install .[test]
pytest
```