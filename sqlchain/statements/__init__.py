"""Fluent, immutable statement builders."""
from sqlchain.statements.alter_table import AlterTable
from sqlchain.statements.base import Statement
from sqlchain.statements.create_index import CreateIndex
from sqlchain.statements.create_table import CreateTable
from sqlchain.statements.delete import Delete
from sqlchain.statements.drop import DropIndex, DropTable
from sqlchain.statements.insert import Insert
from sqlchain.statements.select import Select
from sqlchain.statements.transaction import Transaction, TransactionCommand
from sqlchain.statements.update import Update
from sqlchain.statements.values import Values

__all__ = [
    "AlterTable",
    "CreateIndex",
    "CreateTable",
    "Delete",
    "DropIndex",
    "DropTable",
    "Insert",
    "Select",
    "Statement",
    "Transaction",
    "TransactionCommand",
    "Update",
    "Values",
]
