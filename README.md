# labdevices

A small interactive console for keeping track of a lab's devices and who has
borrowed them.

## Installation

```
pip install .
```

## Device data

The inventory is read from a CSV file. The first line is a header and is
skipped. Each line after it holds five comma-separated fields:

```
name,date,ID,category,cost
Oscilloscope,03/05/2023,OSC-001,Measurement,450.0
```

At most 100 devices are loaded. A cost that is not a number stops the program
with an error message and exit status 1. If the file cannot be opened, or
holds no devices, the program prints `NO DATA` to standard error and exits
with status 1.

## Running

```
labdevices [DATA_FILE]
```

`DATA_FILE` defaults to `devices.csv` in the current directory. The console
reads commands from standard input until the input ends. Commands are matched
regardless of case:

- `borrow` — then one of:
  - `borrow`: choose a period of `3`, `7` or `30` days (or `1` to go back),
    then enter your name, the device name, the device ID and today's date as
    `dd/mm/yyyy`, each on its own line. The due date is computed from the date
    and period. Answer `no`, `No`, `NO` or `n` to enter the details again; any
    other answer records the loan. For 30-day loans, answering `refuse`
    cancels.
  - `show`: `1` lists all loans, `2` lists the loans whose borrower name or
    device ID equals what you type, `3` goes back.
  - `return`: enter a borrower name; every loan under exactly that name is
    removed.
  - `back`
- `search` — `1` by name, `2` by ID, `3` by category, `4` back. Matches are
  exact.
- `sort` — shows the sort options and reads a choice.
- `print` — shows the print options and reads a choice.
- `help` — show the list of commands.

## Using it as a library

```python
from labdevices.devices import read_csv, find_by_category
from labdevices.borrowing import Borrower, BorrowList, add_days

devices = read_csv("devices.csv", 100)
for device in find_by_category(devices, "Measurement"):
    print(device.describe())

loans = BorrowList()
loans.add_last(Borrower("Jane Doe", "Oscilloscope", "OSC-001",
                        "01/02/2024", add_days("01/02/2024", 7)))
print(loans.format_table())
print(loans.format_search("Jane Doe"))
```

`labdevices.devices` also offers `find_by_name`, `find_by_id`, `find_by_cost`,
`standardize_name` and `standardize_date`. `BorrowList` supports `len()`,
iteration, `add_first`, `add_last`, `insert_at`, `delete_first`, `delete_at`,
`delete_last`, `find` and `remove_by_name`. `add_days` raises `ValueError`
for a date that is not `dd/mm/yyyy`.

## What it does not do

- Loans are kept in memory only; they are lost when the console exits.
- The `sort` and `print` menus read a choice but neither sort nor print the
  inventory.
- Searching by cost is available from the library (`find_by_cost`) but not
  from the console.

## Tests

```
pip install .[test]
pytest
```