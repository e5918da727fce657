# sysprogkit

A handful of small systems-programming tools. Each module stands on its own:

- `sysprogkit.dynarray`: `DynArray`, a growable array. It supports
  insertion at an index, removal, mapping, sorting, and linear or binary search.
- `sysprogkit.path`: `Path`, an immutable absolute path. It is split on
  `/` into components and supports prefixes and a shared-prefix depth.
- `sysprogkit.filetree`: `FileTree`, an in-memory hierarchy of
  directories and files rooted at a single directory. `FileStat` describes a node.
- `sysprogkit.errors`: the `Status` enumeration and the `FileTreeError`
  exceptions that the path and file tree modules raise.
- `sysprogkit.miniassembler`: encoders for four ARMv8 instructions
  (`mov`, `adr`, `strb`, `b`). Each one returns the 32-bit machine word.
- `sysprogkit.replace`: replaces every occurrence of one string with
  another, line by line. It also provides a command.
- `sysprogkit.survey`: an interactive questionnaire that checks each
  answer and records the questions and answers. It also provides a command.

The package needs no third-party libraries.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Dynamic array

```python
from sysprogkit.dynarray import DynArray

arr = DynArray(0)
for word in ["pear", "apple", "fig"]:
    arr.add(word)
cmp = lambda a, b: (a > b) - (a < b)
arr.sort(cmp)
print(arr.to_list())            # ['apple', 'fig', 'pear']
print(arr.bsearch("fig", cmp))  # (True, 1)
print(arr.bsearch("kiwi", cmp)) # (False, 2) -- where it would be inserted
print(arr.search("pear", cmp))  # 2  (None when absent)
```

The methods are as follows:

- `DynArray(length)` starts with `length` slots set to `None`.
- `set` returns the element it replaced.
- `remove_at` returns the element it removed.
- `map(func, extra)` calls `func(element, extra)` for each element.
- An index that is out of range raises `IndexError`.

## Paths

```python
from sysprogkit.path import Path

p = Path("Charles/William/George")
q = Path("Charles/Harry/Archie")
print(str(p))                    # Charles/William/George
print(p.depth)                   # 3
print(p.components)              # ('Charles', 'William', 'George')
print(p.shared_prefix_depth(q))  # 1
print(str(p.prefix(2)))          # Charles/William
print(p.component(5))            # None
```

Some inputs raise errors:

- A path that is empty, that begins or ends with `/`, or that contains `//`
  raises `BadPathError`.
- Calling `prefix` with a depth of 0 or less raises `NoSuchPathError`.
- Calling `prefix` with a depth greater than the path's depth also raises
  `NoSuchPathError`.

Paths compare, sort and hash by their string form. `compare_path` and
`compare_string` return -1, 0 or 1.

## File tree

You must call `init()` on a tree before you use it. Operations that fail
raise subclasses of `sysprogkit.errors.FileTreeError`. Each subclass carries
a `status` from `Status`:

- `InitializationError`
- `BadPathError`
- `ConflictingPathError`
- `AlreadyInTreeError`
- `NoSuchPathError`
- `TreeNotADirectoryError`
- `TreeNotAFileError`

```python
from sysprogkit.filetree import FileTree
from sysprogkit.errors import BadPathError, ConflictingPathError

tree = FileTree()
tree.init()
tree.insert_dir("1root/2child/3gkid")        # missing ancestors are created
tree.insert_file("1root/H", b"hello, world!")  # length taken from len(contents)

assert tree.contains_dir("1root/2child")
assert tree.contains_file("1root/H")
print(tree.stat("1root/H"))   # FileStat(is_file=True, size=13)

old = tree.replace_file_contents("1root/H", b"Kernighan")
print(tree.to_string())
# 1root
# 1root/H
# 1root/2child
# 1root/2child/3gkid

try:
    tree.insert_dir("/1root")
except BadPathError:
    pass
try:
    tree.insert_file("A")      # a file cannot be the root
except ConflictingPathError:
    pass

tree.rm_dir("1root/2child")    # removes the whole subtree
tree.destroy()
```

How the operations behave:

- `insert_file(path, contents=None, length=None)` stores `contents` with a
  length in bytes. When you leave out `length`, it is `len(contents)`, or
  0 when there are no contents.
- `contains_dir` and `contains_file` return `False` instead of raising.
- `get_file_contents` and `replace_file_contents` return `None` on any
  failure. `None` is also a valid file content, so a `None` result does not
  show whether the file exists.
- `to_string()` lists every path depth first. At each level, files come
  before directories, and nodes of the same kind are in lexicographic
  order. An empty tree gives `""`.
- Removing the root leaves the tree initialized and empty.

## Instruction encoder

```python
from sysprogkit.miniassembler import adr, b, mov, strb

print(f"0x{adr(0, 0, 0):08x}")   # 0x10000000
word = mov(1, -1)                # immediate is masked to 16 bits
store = strb(0, 1)               # strb w0, [x1]
branch = b(0x10, 0x0)            # b to 0x10 from an instruction at 0x0
```

Arguments outside these ranges raise `ValueError`:

- Registers must be between 0 and 31.
- `mov` immediates must be between -32768 and 32767.
- Addresses must be unsigned 64-bit values.
- Instruction addresses, and the target of `b`, must be multiples of 4.

## Text replacement

```python
import io
from sysprogkit.replace import replace_line, replace_stream

print(replace_line("aaa", "a", "bb"))  # ('bbbbbb', 3)
out = io.StringIO()
count = replace_stream(["one two\n", "two\n"], "two", "2", out)
```

An empty search string replaces nothing and counts 0.

The command reads standard input and writes the result to standard
output. It reports the number of replacements on standard error:

```
sysprogkit-replace fromstring tostring < input.txt > output.txt
```

If it is not given exactly two arguments, it prints a usage message and
exits with status 1.

## Survey

The survey is built from these pieces:

- `Survey(questions, input_stream, output_stream, record)` asks each
  `Question` until the answer passes the question's validator. It then
  writes the question and the answer to `record`.
- `Survey.run(username)` first records the username, then conducts the
  whole survey and returns the answers.
- `QUESTIONS` holds the standard question set.
- The validators are `is_valid_affiliation`, `is_valid_degree`,
  `is_valid_rating` and `is_valid_year`.
- `current_academic_year` gives the calendar year, plus one from August on.

If the input ends before the survey is complete, `EOFError` is raised.

The command conducts the survey interactively on standard input and
output. It writes the questions and answers to a file named `survey` in
the current directory:

```
sysprogkit-survey
```

## What the package does not do

- The file tree lives only in memory. It is not saved anywhere, and
  there is no command for it.
- The instruction encoder is a library only. It does not parse assembly
  text, and it does not write object files.