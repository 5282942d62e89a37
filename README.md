# gamecore

A small Lisp dialect ("ebisp") meant for scripting, together with a handful
of colour helpers.

## Installing

```
pip install .
```

For running the tests:

```
pip install .[test]
pytest
```

## The REPL

```
ebisp-repl
```

The same loop can be started with `python -m gamecore.ebisp.repl`. Each line
you type (up to 1023 characters) is read, every expression on it is
evaluated, and each result is printed:

```
> (+ 1 2 3)
6
> (defun square (x) (* x x))
<lambda>
> (square 7)
49
> `(1 ,(+ 1 1) 3)
(1 2 3)
```

On a parse error the offending place is marked with a caret on standard
error; on an evaluation error `Error:` and the error value are printed there.
The loop ends when standard input is exhausted (exit status 1) or when
`(quit)` is evaluated (exit status 0).

Besides the standard library (`car`, `+`, `*`, `>`, `list`, `assoc`, `set`,
`quote`, `quasiquote`, `unquote`, `begin`, `defun`, `lambda`, `λ`, `when`,
`load`, `append`, `equal`, and the constants `t` and `nil`) the REPL provides:

- `(print "text")` – write a string and a newline,
- `(scope)` – return the current environment as a list of frames,
- `(gc-inspect)` – show the collector's slots, `+` for live and `.` for freed,
- `(quit)` – leave the loop.

### The language

- Numbers are integers; strings are written in double quotes and have no
  escape sequences; everything else is a symbol.
- `'x`, `` `x `` and `,x` read as `(quote x)`, `(quasiquote x)` and
  `(unquote x)`.
- `;` starts a comment that runs to the end of the line.
- `(a . b)` writes a dotted pair.
- `set`, `quote`, `begin`, `defun`, `lambda`, `λ`, `when` and `quasiquote`
  receive their arguments unevaluated.

## Using the interpreter from Python

```python
from gamecore.ebisp.parser import read_expr_from_string
from gamecore.ebisp.scope import Scope
from gamecore.ebisp.std import load_std_library
from gamecore.ebisp.interpreter import evaluate
from gamecore.ebisp.expr import EvalError

scope = Scope()
load_std_library(scope)

result = read_expr_from_string("(+ 1 2)")
print(evaluate(scope, result.expr).to_sexpr())   # 3

try:
    evaluate(scope, read_expr_from_string("(car 1)").expr)
except EvalError as error:
    print(error)   # (wrong-argument-type consp 1)
```

The modules of `gamecore.ebisp`:

- `expr` – the values (`Symbol`, `Number`, `String`, `Cons`, `Lambda`,
  `Native`), `EvalError`, `equal`, `assoc`, `make_list` and the `is_*`
  predicates.
- `tokenizer` – `next_token` and `tokenize`.
- `parser` – `read_expr_from_string`, `read_all_exprs_from_string`,
  `read_expr_from_file`, `read_all_exprs_from_file` (each returns a
  `ParseResult` with `expr` and `end`), `ParseError` and
  `format_parse_error`.
- `scope` – `Scope` with `get_value`, `set_value`, `push_frame` and
  `pop_frame`.
- `interpreter` – `evaluate`, `eval_block`, `match_list` and the error
  constructors.
- `std` – `load_std_library`.
- `gc` – `Gc` with `add`, `collect` and `inspect`.
- `repl` – `load_repl_runtime`, `eval_line` and `main`.

Parse problems raise `ParseError`; evaluation problems raise `EvalError`,
which holds the Lisp value that describes the error in its `expr` attribute.
Native functions are plain Python callables `fun(scope, args)` wrapped in
`Native` and bound with `Scope.set_value`.

## Colours

```python
from gamecore.color import Color, hexstr, hsla

red = hexstr("ff0000")
print(red.to_hex())          # ff0000
print(red.invert().to_hex()) # 00ffff
print(hsla(120.0, 1.0, 0.5, 1.0).to_rgba8())   # (0, 255, 0, 255)
```

`Color` also offers `to_hsla`, `desaturate`, `darker` and `scale`;
`hexstr` gives opaque black for text that is not six characters long.

## What it does not do

- There is no game here: nothing renders, plays sound or loads levels, and
  colours are plain values that nothing draws.
- Memory is managed by Python. `Gc` only keeps track of expressions handed
  to `Gc.add`; the interpreter does not register what it creates, so in the
  REPL `(gc-inspect)` prints an empty line.