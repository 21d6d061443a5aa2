"""JSON-file-backed UnitOfWork.

Repositories stage their ``save_all`` results in memory.  ``commit()``
first writes every staged record set to a temporary sibling file and only
then swaps them into place, so a failure while writing leaves all target
files untouched.
"""

from __future__ import annotations

import logging
from pathlib import Path

from orderentry.domain.exceptions import PersistenceError
from orderentry.domain.repository.unit_of_work import UnitOfWork
from orderentry.infrastructure.persistence.json_customer_repository import (
    JsonCustomerRepository,
)
from orderentry.infrastructure.persistence.json_file import JsonRecordFile
from orderentry.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)
from orderentry.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)

logger = logging.getLogger(__name__)

RECORD_SETS = ("customers", "products", "orders", "order_lines")


class JsonUnitOfWork(UnitOfWork):

    def __init__(self, data_dir: Path) -> None:
        self._files = {
            name: JsonRecordFile(data_dir / f"{name}.json") for name in RECORD_SETS
        }
        self.customers = JsonCustomerRepository(self._files["customers"])
        self.products = JsonProductRepository(self._files["products"])
        self.orders = JsonOrderRepository(
            self._files["orders"], self._files["order_lines"], self.customers
        )

    def _commit(self) -> None:
        staged = [f for f in self._files.values() if f.has_staged]
        written: list[tuple[JsonRecordFile, Path]] = []
        replaced: list[JsonRecordFile] = []
        try:
            for record_file in staged:
                written.append((record_file, record_file.write_temp()))
            for record_file, tmp in written:
                logger.debug("Replacing %s", record_file.path)
                record_file.replace_with(tmp)
                replaced.append(record_file)
        except PersistenceError:
            if replaced:
                pending = [f for f, _ in written if f not in replaced]
                logger.error(
                    "Commit only partially applied: replaced %s, not replaced %s",
                    ", ".join(f.path.name for f in replaced),
                    ", ".join(f.path.name for f in pending),
                )
            self.rollback()
            raise
        finally:
            for _, tmp in written:
                tmp.unlink(missing_ok=True)
        logger.debug("Committed %d file(s)", len(written))

    def rollback(self) -> None:
        for record_file in self._files.values():
            record_file.discard()
