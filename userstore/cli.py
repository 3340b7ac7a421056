"""Interactive menu for exploring the user repository.

Usage:
    python -m userstore.cli                   # Menu with default config
    python -m userstore.cli --lenient-batch   # Don't check batch sizes
    python -m userstore.cli --config my.json  # Use custom config file
"""

import argparse
import sys
from pathlib import Path
from typing import Callable, Dict, List, Optional, TextIO

from pydantic import ValidationError

from userstore.models.dto import UserCreateRequest, UserDTO, UserUpdateRequest
from userstore.repositories import RepositoryError, UserRepository, add_integers, print_ids
from userstore.services.config_service import ConfigService, get_config_service
from userstore.services.user_service import UserService
from userstore.utils.logger import get_logger, set_log_level

logger = get_logger(__name__)

MENU = """
===== GENERIC DAO DEMO =====
1  - Save
2  - Save batch
3  - Save all
4  - Find all
5  - Find by id
6  - Update
7  - Delete
8  - Print IDs
9  - Add integers
10 - Count
0  - Exit
===========================
Choose:"""

EXIT_OPTION = 0


class MenuApp:
    """Text menu dispatching numbered options to the user service.

    Reads from stdin and writes to stdout unless other streams are given,
    which lets tests drive the loop with StringIO.
    """

    def __init__(
        self,
        service: UserService,
        config: ConfigService,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
    ):
        self.service = service
        self.config = config
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout
        self._actions: Dict[int, Callable[[], None]] = {
            1: self.save,
            2: self.save_batch,
            3: self.save_all,
            4: self.find_all,
            5: self.find_by_id,
            6: self.update,
            7: self.delete,
            8: self.print_ids,
            9: self.add_integers_demo,
            10: self.count,
        }

    def run(self) -> None:
        """Loop until the exit option is chosen or input runs out."""
        running = True
        while running:
            self._print(MENU)
            try:
                line = self._readline()
            except EOFError:
                break

            try:
                option = int(line)
            except ValueError:
                self._print("Invalid option")
                continue

            try:
                running = self.dispatch(option)
            except EOFError:
                break

        self._print("Finished.")

    def dispatch(self, option: int) -> bool:
        """Run one menu option. Returns False when the loop should stop."""
        if option == EXIT_OPTION:
            return False

        action = self._actions.get(option)
        if action is None:
            self._print("Invalid option")
            return True

        try:
            action()
        except ValidationError as e:
            self._print(f"Invalid input: {e}")
        except RepositoryError as e:
            logger.warning("Option %d failed: %s", option, e)
            self._print(f"Error: {e}")
        except ValueError as e:
            self._print(f"Invalid input: {e}")
        return True

    # ================= ACTIONS =================

    def save(self) -> None:
        user = self.service.create_user(self._read_user())
        self._print(f"Saved: {format_user(user)}")

    def save_batch(self) -> None:
        requests = self._demo_requests(self.config.get_demo_batch())
        self.service.save_batch(requests)
        self._print("Batch saved.")

    def save_all(self) -> None:
        requests = self._demo_requests(self.config.get_demo_bulk())
        self.service.save_all(requests)
        self._print("saveAll executed.")

    def find_all(self) -> None:
        for user in self.service.list_users().users:
            self._print(format_user(user))

    def find_by_id(self) -> None:
        user_id = self._read_int("ID: ")
        user = self.service.find_user(user_id)
        self._print(format_user(user) if user else "User not found")

    def update(self) -> None:
        user_id = self._read_int("ID to update: ")
        name = self._prompt("New name: ")
        age = self._read_int("Age: ")

        updated = self.service.update_user(user_id, UserUpdateRequest(name=name, age=age))
        self._print(f"Updated: {format_user(updated)}")

    def delete(self) -> None:
        removed = self.service.delete_user(self._read_user())
        self._print("Deleted." if removed else "User not found.")

    def print_ids(self) -> None:
        print_ids(self.service.all_users(), file=self.stdout)

    def add_integers_demo(self) -> None:
        numbers: List[object] = []
        result = add_integers(numbers)

        self._print("Numbers after addIntegers:")
        for number in result:
            self._print(number)

    def count(self) -> None:
        self._print(f"Total records: {self.service.count()}")

    # ================= HELPERS =================

    def _read_user(self) -> UserCreateRequest:
        user_id = self._read_int("ID: ")
        name = self._prompt("Name: ")
        age = self._read_int("Age: ")
        return UserCreateRequest(id=user_id, name=name, age=age)

    def _read_int(self, prompt: str) -> int:
        value = self._prompt(prompt)
        try:
            return int(value)
        except ValueError:
            raise ValueError(f"'{value}' is not a whole number") from None

    def _prompt(self, prompt: str) -> str:
        self.stdout.write(prompt)
        self.stdout.flush()
        return self._readline()

    def _readline(self) -> str:
        line = self.stdin.readline()
        if not line:
            raise EOFError
        return line.strip()

    def _print(self, message: object) -> None:
        print(message, file=self.stdout)

    @staticmethod
    def _demo_requests(seed: List[dict]) -> List[UserCreateRequest]:
        return [UserCreateRequest(**fields) for fields in seed]


def format_user(user: UserDTO) -> str:
    """One-line display form of a user."""
    return f"User(id={user.id}, name={user.name!r}, age={user.age})"


def build_app(
    config: ConfigService,
    lenient_batch: bool = False,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> MenuApp:
    """Wire repository, service and menu together."""
    strict = config.is_strict_batch_size() and not lenient_batch
    repo = UserRepository(strict_batch_size=strict)
    return MenuApp(UserService(repo), config, stdin=stdin, stdout=stdout)


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Interactive generic repository demo")
    parser.add_argument("--config", type=Path, default=None,
                        help="Configuration JSON file (default: bundled config)")
    parser.add_argument("--log-level", default=None,
                        help="Log level, e.g. DEBUG or WARNING (default: from config)")
    parser.add_argument("--lenient-batch", action="store_true",
                        help="Accept batches whose declared size doesn't match")
    args = parser.parse_args(argv)

    config = ConfigService(args.config) if args.config else get_config_service()

    try:
        set_log_level(args.log_level or config.get_log_level())
    except ValueError as e:
        parser.error(str(e))

    build_app(config, lenient_batch=args.lenient_batch).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
