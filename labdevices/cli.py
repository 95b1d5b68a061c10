"""Interactive console for borrowing, returning and searching lab devices."""

from __future__ import annotations

import argparse
import sys
from typing import Iterable, Sequence, TextIO

from labdevices.borrowing import Borrower, BorrowList, add_days
from labdevices.devices import (
    Device,
    find_by_category,
    find_by_id,
    find_by_name,
    read_csv,
)

DEFAULT_DATA_FILE = "devices.csv"

_RULE = "--------------------------------------------------------\n"
_DECLINE_ANSWERS = frozenset({"NO", "no", "n", "No"})
_BORROW_PERIODS = (3, 7, 30)


def help_text() -> str:
    """The text shown for the 'help' command."""
    return (
        "------------------------------------------------------------------------------\n"
        "Our project provides 4 options with multiple 'mini' options within each of them.\n"
        "Having fun discorvering them ^^!\n"
        "NOTE: You can type any characters below in any form, such as 'BorRow'.\n"
        "    It's perfectly fine, because my work is a work of art.\n"
        "So:\n"
        "Type 'borrow' to enter borrow option;\n"
        "Type 'search' to enter search option;\n"
        "Type 'sort' to enter sort option;\n"
        "Type 'print' to enter print option.\n"
    )


class _Input:
    """Reads whitespace-separated words and whole lines from one text stream."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._rest = ""

    def _next_line(self) -> str:
        line = self._stream.readline()
        if not line:
            raise EOFError
        return line

    def word(self) -> str:
        """Next whitespace-delimited word, reading more lines as needed."""
        while not self._rest.strip():
            self._rest = self._next_line()
        stripped = self._rest.lstrip()
        parts = stripped.split(maxsplit=1)
        token = parts[0]
        self._rest = stripped[len(token):]
        return token

    def integer(self) -> int | None:
        """Next word as an integer, or None if it is not one."""
        token = self.word()
        try:
            return int(token)
        except ValueError:
            return None

    def skip_char(self) -> None:
        """Drop one pending character, normally the newline after a word."""
        if self._rest:
            self._rest = self._rest[1:]

    def line(self) -> str:
        """Rest of the current line, or the next line, without its newline."""
        if not self._rest:
            self._rest = self._next_line()
        text, newline, after = self._rest.partition("\n")
        self._rest = after if newline else ""
        return text.rstrip("\r")


class Console:
    """Menu-driven session over a device inventory and a list of loans."""

    def __init__(self, devices: Iterable[Device], stdin: TextIO, stdout: TextIO) -> None:
        self.devices: list[Device] = list(devices)
        self.borrowers = BorrowList()
        self._in = _Input(stdin)
        self._out = stdout

    def _write(self, text: str) -> None:
        self._out.write(text)

    def run(self) -> None:
        """Read commands until the input ends."""
        self._write(
            "WELCOME TO OUR DEVICE MANAGEMENT PRJ!!\n"
            "----------------------------------\n"
            "If you are new here, please type 'help' for more information\n"
        )
        commands = {
            "borrow": self._borrow_menu,
            "sort": self._sort_menu,
            "search": self.search,
            "print": self._print_menu,
            "help": lambda: self._write(help_text()),
        }
        try:
            while True:
                action = commands.get(self._in.word().lower())
                if action is None:
                    self._write(
                        "Please enter a valid option or 'help' for more information.\n"
                    )
                    continue
                action()
        except EOFError:
            return

    def _invalid(self, menu: str = "menu") -> None:
        self._write("Invalid option. Returning to main menu.\n" f"You are in {menu}!\n")

    def _borrow_menu(self) -> None:
        self._write(
            "Please enter one of these options: 'borrow', 'show', 'return' or 'back'\n"
        )
        option = self._in.word().lower()
        if option == "borrow":
            self.borrow()
        elif option == "show":
            self.show_borrowers()
        elif option == "return":
            self.return_device()
        elif option == "back":
            self._write("Back to menu successfully!!\n")
        else:
            self._write("Invalid option. Returning to main menu.\nYou are in menu.\n")

    def _sort_menu(self) -> None:
        self._write(
            "--------------------------------------------------------\n"
            "We provide 2 options: sort by name or sort by category\n"
            "Please enter '1' for sort by name or '2' for sort by category "
            "or '3' for back to menu\n"
        )
        choice = self._in.integer()
        if choice in (1, 2):
            return
        if choice == 3:
            self._write("Back to menu successfully!\n")
        else:
            self._invalid()

    def _print_menu(self) -> None:
        self._write(
            "-------------------------------------------\n"
            "We provide 3 options print: 'print all devices', 'print a single device' "
            "and 'back to menu'\n"
            "Please enter '1', '2' or '3' for each of above options, respectively!\n"
        )
        self._in.integer()

    def _read_loan(self, days: int) -> Borrower:
        self._write("Please enter your name:\n")
        name = self._in.line()
        self._write("Please enter device you want to borrow and its ID:\n")
        device_name = self._in.line()
        device_id = self._in.line()
        self._write("Please enter today following format 'xx/xx/xxxx':\n")
        today = self._in.line()
        try:
            expired = add_days(today, days)
        except ValueError:
            self._write("Invalid date format!\n")
            expired = ""
        loan = Borrower(name, device_name, device_id, today, expired)
        self._write(
            "--------------------------------------\n"
            "CONFIRM YOUR INFORMATION:\n"
            f"Your name: {loan.name}\n"
            f"Device you want to borrow: {loan.device_name}\n"
            f"Device ID: {loan.device_id}\n"
            f"Today: {loan.today}\n"
            f"Expired day: {loan.expired_day}\n"
            "------------------------------------------------------\n"
            "Now, enter 'yes' to confirm or 'no' to enter again\n"
            "NOTE: you can type 'y', 'n', it will still work bc this is a work of art ^^!!\n"
        )
        return loan

    def borrow(self) -> None:
        """Ask for a loan period and details, then record the confirmed loan."""
        self._write(
            _RULE
            + "You can select a suitable period to borrow lab devices.\n"
            "We provide 3 periods: 3 days, 7 days or 30 days or back to 'borrow' menu!!\n"
            "Please enter '3', '7', '30' or '1' to choose borrowing period.\n"
        )
        days = self._in.integer()
        self._in.skip_char()
        if days == 1:
            self._write("Back to menu successfully!!\n")
            return
        if days not in _BORROW_PERIODS:
            self._write(
                "Invalid option. Returning to 'borrow' menu.\n"
                "You are in 'borrow' option!\n"
            )
            return
        if days == 30:
            self._write("You can refuse to enter in by enter 'refuse' ^^!\n")
        while True:
            loan = self._read_loan(days)
            answer = self._in.line()
            if answer in _DECLINE_ANSWERS:
                self._write("Please enter your information again ^^: \n")
            elif days == 30 and answer == "refuse":
                self._write("Back to 'borrow' menu!!\n")
                return
            else:
                self.borrowers.add_last(loan)
                menu = "borrow" if days == 3 else "'borrow'"
                self._write(f"Borrow successfully!! Return to {menu} menu\n")
                return

    def show_borrowers(self) -> None:
        """Show all loans, or the loans of one borrower name or device ID."""
        self._write(
            "---------------------------------------------------------------------------\n"
            "We provide 3 options: show all borrower list or show only one borrower data "
            "or back to 'show' menu.\n"
            "Please enter '1' or '2' or '3' to choose suitable showing options.\n"
        )
        choice = self._in.integer()
        self._in.skip_char()
        if choice == 1:
            self._write(self.borrowers.format_table())
            self._write("Return to 'show' option\n")
        elif choice == 2:
            self._write("Enter borrower name or ID to show: \n")
            self._write(self.borrowers.format_search(self._in.line()))
        elif choice == 3:
            self._write("Back to 'show' menu successfully!!\n")
        else:
            self._write(
                "Invalid option. Returning to 'show' menu.\n"
                "You are in 'show' option!\n"
            )

    def return_device(self) -> None:
        """Remove the loans registered under a name read from input."""
        self._in.skip_char()
        self._write(
            "----------------------------------\n"
            "Enter your name (name you registered to borrow): \n"
        )
        name = self._in.line()
        if self.borrowers.remove_by_name(name):
            self._write("Return successfullly ^^!!\n")

    def search(self) -> None:
        """Search the inventory by name, ID or category."""
        self._write(
            "-------------------------------------------\n"
            "We provide 3 options search: 'search by name', 'search by ID' and "
            "'search by category' and 1 for 'back to menu'\n"
            "Please enter '1', '2', '3' or '4' for each of above options, respectively!\n"
        )
        choice = self._in.integer()
        searches = {
            1: ("Enter device name: ", find_by_name),
            2: ("Enter device ID: ", find_by_id),
            3: ("Enter devices category: ", find_by_category),
        }
        if choice == 4:
            self._write("Back to menu successfully!\n")
            return
        if choice not in searches:
            self._invalid()
            return
        prompt, finder = searches[choice]
        self._write(prompt)
        self._in.skip_char()
        query = self._in.line()
        matches = finder(self.devices, query)
        for device in matches:
            self._write(device.describe() + "\n")
        if not matches:
            self._write(f"No result matches value: {query}\n")


def main(argv: Sequence[str] | None = None) -> int:
    """Load the inventory and run the console; return the exit status."""
    parser = argparse.ArgumentParser(description="Lab device management console.")
    parser.add_argument("data_file", nargs="?", default=DEFAULT_DATA_FILE)
    args = parser.parse_args(argv)
    try:
        devices = read_csv(args.data_file)
    except OSError:
        sys.stderr.write(f"Cannot open file: {args.data_file}\n")
        devices = []
    except ValueError as exc:
        sys.stderr.write(f"{exc}\n")
        return 1
    if not devices:
        sys.stderr.write("NO DATA\n\n")
        return 1
    Console(devices, sys.stdin, sys.stdout).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())