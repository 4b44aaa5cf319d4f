# minigit

A deliberately small version-control tool. It keeps everything in a
`.minigit` directory inside the repository root:

- `objects/` holds file contents as blobs, each named `<hash>.txt` after a
  64-bit DJB2 hash of the content
- `commits/` holds one text file per commit
- `branches/` holds one text file per branch, containing the commit it points at
- `HEAD.txt` holds the current commit id (`NULL` right after `init`)
- `staging_area.txt` holds one `<filename> <hash>` line per `add`

`init` also creates an empty `main` branch.

## Installing

```
pip install .
```

## Using the shell

Start the interactive prompt:

```
minigit
```

Use `-C DIR` or `--directory DIR` to work in a repository root other than
the current directory. The repository is initialised on start. Commands are
then typed at the `mingit >` prompt:

| Command | What it does |
| --- | --- |
| `init` | create `.minigit` if it is not there yet |
| `add <file>` | store the file's content as a blob and append it to the staging area |
| `commit <message>` | record a commit whose parent is the current HEAD; the message is the rest of the line |
| `log` | print each commit from HEAD back through its parents, separated by `------------` |
| `branch <name>` | create a branch at the current HEAD commit |
| `checkout <name-or-commit>` | move HEAD to a branch's commit if the branch exists, otherwise to a commit id |
| `merge <branch>` | merge a branch into the current branch |

Any other word prints `Unknown command.`. Commands are read until end of
input, so a script can be piped in:

```
printf 'add notes.txt\ncommit first notes\nlog\n' | minigit
```

A commit created with `commit` is stored as `commit_<n>.txt`, where `n` is a
random number below 10000, with the lines `ID:`, `Message:`, `Time:` and
`Parent:`.

## Using it from Python

```python
from pathlib import Path

from minigit.repository import init, add_file
from minigit.commit import make_commit, log_lines
from minigit.branching import create_branch, checkout_branch

root = Path(".")
init(root)                        # False if .minigit already exists
add_file(root, "notes.txt")       # returns the content hash
commit_id = make_commit(root, "first notes", rng=None)
create_branch(root, "feature")    # returns the commit the branch points at
checkout_branch(root, "feature")
print("\n".join(log_lines(root)))
```

`make_commit` takes an optional `random.Random` as `rng` so that commit ids
can be made reproducible.

The modules are:

- `minigit.repository`: `init`, `check_file_exists`, `hash_content`,
  `write_blob`, `stage_file`, `add_file`, and `MiniGitError`
- `minigit.commit`: `current_time`, `last_commit_id`, `update_head`,
  `make_commit`, `log_lines`
- `minigit.branching`: `create_branch`, `checkout_branch`, `checkout_commit`,
  `BranchNotFoundError`, `CommitNotFoundError`
- `minigit.merge`: `branch_commit_id`, `current_branch`,
  `write_commit_object`, `find_lca`, `three_way_merge`, `merge`, `MergeError`
- `minigit.cli`: `main`, the command loop

Failures raise exceptions. `MiniGitError` is the base class;
`BranchNotFoundError`, `CommitNotFoundError` and `MergeError` derive from it.

## What it does not do

- Checkout only moves HEAD. It does not restore any files in the working
  directory, and commits do not record which blobs they contain.
- `merge` needs HEAD to read `ref: <branch>`. Nothing in the package writes
  HEAD in that form (commits and checkouts store a plain commit id), so
  unless you edit `HEAD.txt` by hand, `merge` reports
  `Cannot merge in detached HEAD state.`.
- Merges never combine file contents. `find_lca` treats the current commit
  as the common ancestor whenever its commit file exists, so a merge either
  fast-forwards or reports that no common ancestor was found. A merge commit
  written by `three_way_merge` records only the two parents, a timestamp and
  a message.
- Commit ids are random and can collide, overwriting an earlier commit.
- There is no status, diff or remote support, and the staging area is never
  cleared.