"""Account history XML export reader and writer.

The export looks like::

    <account-history>
      <operations>
        <operation>
          <order-date>2024-03-15</order-date>
          <exec-date>2024-03-15</exec-date>
          <type>Spłata kredytu</type>
          <description>KAPITAŁ: 100,00 ODSETKI: 20,00 ...</description>
          <amount curr="PLN">-125,00</amount>
          <ending-balance curr="PLN">+1 000,00</ending-balance>
        </operation>
      </operations>
    </account-history>

Other elements (search criteria, account info) are ignored.
"""

import logging
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Iterable

from loan_history.exceptions import HistoryFormatError
from loan_history.models import Amount, RawTransaction

logger = logging.getLogger(__name__)

ROOT_TAG = "account-history"


def _text(element: ET.Element, tag: str, strip: bool = True) -> str:
    child = element.find(tag)
    if child is None or child.text is None:
        return ""
    return child.text.strip() if strip else child.text


def _amount(element: ET.Element, tag: str) -> Amount:
    child = element.find(tag)
    if child is None:
        return Amount("", "")
    return Amount((child.text or "").strip(), child.get("curr", ""))


def _parse_root(root: ET.Element) -> list[RawTransaction]:
    if root.tag != ROOT_TAG:
        raise HistoryFormatError(f"Expected <{ROOT_TAG}> root, found <{root.tag}>")

    transactions = [
        RawTransaction(
            order_date=_text(op, "order-date"),
            exec_date=_text(op, "exec-date"),
            type=_text(op, "type", strip=False),
            description=_text(op, "description", strip=False),
            amount=_amount(op, "amount"),
            ending_balance=_amount(op, "ending-balance"),
        )
        for op in root.iterfind("operations/operation")
    ]
    logger.debug("Parsed %d operations", len(transactions))
    return transactions


def parse_history(text: str | bytes) -> list[RawTransaction]:
    """Parse an account history export from a string.

    Raises
    ------
    HistoryFormatError
        If the text is not well-formed XML or not an account history.
    """
    try:
        root = ET.fromstring(text)
    except ET.ParseError as e:
        raise HistoryFormatError(f"Malformed account history: {e}") from e
    return _parse_root(root)


def read_history(path: str | Path) -> list[RawTransaction]:
    """Read an account history export file.

    Parameters
    ----------
    path : str | Path
        XML file path.

    Returns
    -------
    list[RawTransaction]
        Operations in file order.

    Raises
    ------
    HistoryFormatError
        If the file is not a well-formed account history or cannot be
        read (a directory, no permission).
    FileNotFoundError
        If the file does not exist.
    """
    path = Path(path)
    try:
        tree = ET.parse(path)
    except ET.ParseError as e:
        raise HistoryFormatError(f"Malformed account history {path}: {e}") from e
    except FileNotFoundError:
        raise
    except OSError as e:
        raise HistoryFormatError(f"Cannot read account history {path}: {e}") from e

    transactions = _parse_root(tree.getroot())
    logger.info(
        "Read %d operations from %s",
        len(transactions),
        path,
        extra={"source": str(path), "operations": len(transactions)},
    )
    return transactions


def write_history(transactions: Iterable[RawTransaction], path: str | Path) -> int:
    """Write transactions as an account history export.

    Returns
    -------
    int
        Number of operations written.
    """
    root = ET.Element(ROOT_TAG)
    operations = ET.SubElement(root, "operations")
    count = 0

    for tx in transactions:
        op = ET.SubElement(operations, "operation")
        ET.SubElement(op, "order-date").text = tx.order_date
        ET.SubElement(op, "exec-date").text = tx.exec_date
        ET.SubElement(op, "type").text = tx.type
        ET.SubElement(op, "description").text = tx.description
        for tag, amount in (("amount", tx.amount), ("ending-balance", tx.ending_balance)):
            ET.SubElement(op, tag, curr=amount.currency).text = amount.value
        count += 1

    tree = ET.ElementTree(root)
    ET.indent(tree)
    tree.write(Path(path), encoding="utf-8", xml_declaration=True)
    logger.info("Wrote %d operations to %s", count, path)
    return count
