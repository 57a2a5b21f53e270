# calcarith

Find every arithmetic expression in a text file, calculate it, and write the
text back out with each expression replaced by its result.

```
Here's an arithmetic 1+1=2.
```

becomes

```
Here's an arithmetic 2=2.
```

An expression is a run of non-negative integer literals joined by at least
one of the operators `+ - * /`, with optional parentheses and whitespace.
A number standing alone is left as it is. Multiplication and division bind
tighter than addition and subtraction, operators of equal precedence are
applied left to right, and division is integer division truncating toward
zero.

## Installation

```
pip install .
```

## Usage

```
calcarith cli INPUT_FILE OUTPUT_FILE
```

reads `INPUT_FILE` as UTF-8, replaces every arithmetic expression and
writes the result to `OUTPUT_FILE` (created with mode 0644, or truncated if
it exists). Line endings are kept as they are. If the file cannot be read or
written, or an expression cannot be evaluated (for example a division by
zero), a message goes to standard error and the exit status is 1.

Running `calcarith` without a subcommand prints the help. The same entry
point is available as `python -m calcarith.cli`.

### Environment

On start the program requires a `.env` file in the current directory; if
there is none it prints `Error loading .env file` and exits with status 1.
Variables already set in the environment take precedence over the file.
It reads:

- `APPROOTDIR`: the name of the application's root directory. The current
  working directory must contain it; the root is the working directory cut
  off just after its first occurrence. If it is empty or absent from the
  path, the program exits with status 1.
- `LOCALESDIR`: the directory, relative to that root, holding message
  catalogues, one sub-directory per language (for example `en_US`,
  `ru_RU`).

A language's catalogue for the `default` domain is looked up as
`default.po` or `default.mo`, first in `<language>/LC_MESSAGES/`, then in
`<language>/`, then the same under the two-letter language name. A missing
catalogue means messages stay untranslated.

The interface language is taken from the first non-empty of `LANGUAGE`,
`LC_ALL`, `LC_MESSAGES` and `LANG`. Any code containing `ru` (in any case)
selects Russian (`ru_RU`); everything else selects English (`en_US`).

## Library use

```python
from calcarith.evaluator import evaluate
from calcarith.filter import replace_math_expressions

evaluate("2*(5+5*2)/3+(6/2+8)")          # 21
replace_math_expressions("x = 6-4 / 2")  # "x = 4"
```

`evaluate` raises `ValueError` on a malformed expression (an unexpected
character, unbalanced parentheses, a missing operand) and
`ZeroDivisionError` on division by zero.

`calcarith.fileio` provides `read_file(path)` and `write_file(path, content)`.

`calcarith.locale_paths` provides `get_pwd_dir_path()` and
`get_locale_path()`, which resolve the root and locales directories as
described above.

`calcarith.translations` provides the message lookup:

- `initialize()` configures the current language from the environment and
  loads a `Locale` for every sub-directory of the locales directory.
- `t(text, *args)` translates into the current language, applying
  `%`-formatting when arguments are given.
- `set_current_locale(lang)`, `get_current_language()`,
  `get_supported_languages()`, `get_language_code()`,
  `new_language_from_string(code)`, `setup_locales(path)`.
- `LanguageCode`, a string subclass with `t(text)` to translate into that
  language, and the constants `EN` and `RU`.
- `Locale(path, language)` with `add_domain(domain)` and `get(text, *args)`.
- `parse_po(text)`, which turns PO catalogue text into a `msgid` to
  translation mapping.

## What it does not do

The `console`, `gui` and `web` subcommands exist but only print that they
are not supported yet: there is no interactive console, graphical or web
interface. Negative numbers and unary minus are not understood, and only
integer arithmetic is done.

## Tests

```
pip install .[test]
pytest
```