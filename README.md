# tinyts

Front ends for two toy languages whose syntax follows TypeScript.

- **arith**: booleans, small integers (0–255), `+`, and the conditional
  operator `cond ? a : b`. It has a lexer, a parser and a type checker.
- **basic**: everything in arith, plus variables, `const` bindings,
  sequencing with `;`, anonymous functions with typed parameters such as
  `(x: number) => x`, and calls with no arguments such as `f()`. It has a
  lexer and a parser.

The package has no runtime dependencies.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## The arith language

Modules: `tinyts.arith_token`, `tinyts.arith_term`, `tinyts.arith_parse`
and `tinyts.arith_typecheck`.

```python
from tinyts.arith_parse import parse
from tinyts.arith_typecheck import Type, typecheck

term = parse("true ? 0 : 1 + 2")
assert typecheck(term) is Type.INTEGER
```

The terms are frozen dataclasses: `Bool`, `Integer`, `Add` and `If`.
`Integer` accepts only ints from 0 to 255.

`+` and `?:` both associate to the right. `3 + 4 + 5` parses as
`Add(Integer(3), Add(Integer(4), Integer(5)))`.

`typecheck` returns `Type.BOOLEAN` or `Type.INTEGER`. It raises
`TypeCheckError` in three cases:

- an operand of `+` is not an integer (`integer expected`);
- the condition of a conditional is not a boolean (`boolean expected`);
- the two branches of a conditional have different types
  (`then and else have different types`).

```python
from tinyts.arith_typecheck import TypeCheckError

try:
    typecheck(parse("1 + true"))
except TypeCheckError as err:
    print(err)  # integer expected
```

## The basic language

Modules: `tinyts.basic_token`, `tinyts.basic_types`, `tinyts.basic_term`
and `tinyts.basic_parse`.

```python
from tinyts.basic_parse import parse
from tinyts.basic_term import Const, Integer, Seq, Var

term = parse("const x = 1; x; 2")
assert term == Const("x", Integer(1), Seq(Var("x"), Integer(2)))
```

Besides the arith terms, `tinyts.basic_term` has `Var`, `Func`, `Call`,
`Seq` and `Const`. A trailing `;` is optional: `"0;"` parses as
`Integer(0)`.

Function parameters are `Param` values from `tinyts.basic_types`, and must
be annotated `number` (`IntegerType`) or `boolean` (`BooleanType`); any
other annotation raises `ParseError`. `tinyts.basic_types` also has
`FuncType`, and every type prints in TypeScript notation, for example
`(x: number) => boolean`.

## Tokens and errors

`tinyts.arith_token.tokenize` and `tinyts.basic_token.tokenize` yield
tokens lazily, skipping whitespace. Each `Token` has a `kind`, its `text`,
its `start` and `end` offsets (also as `span`), and a `value`: the number
of an integer, or in the basic language the name of an identifier.

Text that is not a token, or an integer literal above 255, raises
`LexError`. Tokens that do not form a term raise `ParseError`, which keeps
the offending token (or `None` at end of input) in its `token` attribute.

## What the package does not do

- There is no type checker for the basic language, and no evaluator for
  either language.
- Calls in the basic language take no arguments; `f(1)` is a parse error.
- There is no command-line program; the package is used as a library.