"""Transaction builder: control commands around an ordered list of statements."""
from __future__ import annotations

from typing import ClassVar

from pydantic import BaseModel, ConfigDict

from sqlchain.clauses import StatementKind, TransactionClause
from sqlchain.compile.clause_builders import (
    ClauseBuilder,
    CommandBuilder,
    OrderedCommandsBuilder,
)
from sqlchain.fmt import Formatter
from sqlchain.statements.accumulate import push
from sqlchain.statements.alter_table import AlterTable
from sqlchain.statements.base import Statement
from sqlchain.statements.create_index import CreateIndex
from sqlchain.statements.create_table import CreateTable
from sqlchain.statements.delete import Delete
from sqlchain.statements.drop import DropIndex, DropTable
from sqlchain.statements.insert import Insert
from sqlchain.statements.select import Select
from sqlchain.statements.update import Update

Tx = TransactionClause


class TransactionCommand(BaseModel):
    """A single control command such as ``SAVEPOINT foo``.

    Attributes:
        command: Which command this is.
        argument: Optional text after the keyword (mode, savepoint name, ...).
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    command: TransactionClause
    argument: str = ""

    def concat(self, fmts: Formatter) -> str:
        if not self.argument:
            return self.command.value
        return f"{self.command.value}{fmts.space}{self.argument}"


class Transaction(Statement):
    """Builder for a multi-statement transaction.

    ``BEGIN``, ``START TRANSACTION``, ``SET TRANSACTION``, ``COMMIT`` and
    ``END`` hold one command each (last call wins).  Savepoints, rollbacks and
    embedded statements render between them in call order.  Every command is
    terminated with ``;``.  Raw splices are not applied to transactions; use
    :meth:`raw` for a prefix.

    Example::

        (
            Transaction()
            .start_transaction("READ WRITE")
            .insert(Insert().insert_into("users (login)").values("('foo')"))
            .commit("TRANSACTION")
        )
        # START TRANSACTION READ WRITE; INSERT INTO users (login) VALUES ('foo'); COMMIT TRANSACTION;
    """

    kind: ClassVar[StatementKind] = StatementKind.TRANSACTION
    clause_enum: ClassVar[type[TransactionClause]] = TransactionClause
    clause_builders: ClassVar[dict[TransactionClause, ClauseBuilder]] = {
        Tx.BEGIN: CommandBuilder("begin_command"),
        Tx.START_TRANSACTION: CommandBuilder("start_transaction_command"),
        Tx.SET_TRANSACTION: CommandBuilder("set_transaction_command"),
        Tx.ORDERED_COMMANDS: OrderedCommandsBuilder("ordered_commands"),
        Tx.COMMIT: CommandBuilder("commit_command"),
        Tx.END: CommandBuilder("end_command"),
    }

    begin_command: TransactionCommand | None = None
    start_transaction_command: TransactionCommand | None = None
    set_transaction_command: TransactionCommand | None = None
    ordered_commands: tuple[Statement | TransactionCommand, ...] = ()
    commit_command: TransactionCommand | None = None
    end_command: TransactionCommand | None = None

    # ------------------------------------------------------------------
    # Fixed slots
    # ------------------------------------------------------------------

    def begin(self, mode: str = "") -> Transaction:
        return self._slot("begin_command", Tx.BEGIN, mode)

    def start_transaction(self, mode: str = "") -> Transaction:
        return self._slot("start_transaction_command", Tx.START_TRANSACTION, mode)

    def set_transaction(self, mode: str = "") -> Transaction:
        return self._slot("set_transaction_command", Tx.SET_TRANSACTION, mode)

    def commit(self, arg: str = "") -> Transaction:
        return self._slot("commit_command", Tx.COMMIT, arg)

    def end(self, arg: str = "") -> Transaction:
        return self._slot("end_command", Tx.END, arg)

    # ------------------------------------------------------------------
    # Ordered commands
    # ------------------------------------------------------------------

    def savepoint(self, name: str) -> Transaction:
        return self._command(TransactionCommand(command=Tx.SAVEPOINT, argument=name.strip()))

    def release_savepoint(self, name: str) -> Transaction:
        return self._command(
            TransactionCommand(command=Tx.RELEASE_SAVEPOINT, argument=name.strip())
        )

    def rollback(self, arg: str = "") -> Transaction:
        """Add ``ROLLBACK [arg]``, e.g. ``"TO SAVEPOINT foo"``."""
        return self._command(TransactionCommand(command=Tx.ROLLBACK, argument=arg.strip()))

    def statement(self, stmt: Statement) -> Transaction:
        """Add any statement builder to the ordered body."""
        return self._command(stmt)

    def select(self, select: Select) -> Transaction:
        return self._command(select)

    def insert(self, insert: Insert) -> Transaction:
        return self._command(insert)

    def update(self, update: Update) -> Transaction:
        return self._command(update)

    def delete(self, delete: Delete) -> Transaction:
        return self._command(delete)

    def create_table(self, create_table: CreateTable) -> Transaction:
        return self._command(create_table)

    def alter_table(self, alter_table: AlterTable) -> Transaction:
        return self._command(alter_table)

    def create_index(self, create_index: CreateIndex) -> Transaction:
        return self._command(create_index)

    def drop_table(self, drop_table: DropTable) -> Transaction:
        return self._command(drop_table)

    def drop_index(self, drop_index: DropIndex) -> Transaction:
        return self._command(drop_index)

    def _slot(self, field: str, clause: TransactionClause, arg: str) -> Transaction:
        self._check(clause)
        command = TransactionCommand(command=clause, argument=arg.strip())
        return self._update(field, command)

    def _command(self, command: Statement | TransactionCommand) -> Transaction:
        return self._update("ordered_commands", push(self.ordered_commands, command))
