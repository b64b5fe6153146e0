from pathlib import Path
from typing import List, Optional, Sequence, Tuple, Union

from loguru import logger

from .class_models import Item, Receipt
from .config import settings
from .exceptions import FileEmptyError, FileReadError, ReceiptFormatError, ReceiptParseError
from .price import parse_digits, parse_price


def parse_item(line: str, file_path: Optional[Path] = None) -> Item:
    """
    Parse one item line of a receipt.

    The line has the shape "<price> [x<count>] <name tokens...> <consumer>", e.g.
    "15 chocolate donut g" or "0.3 x4 pizza m".

    Args:
        line: The raw line from the receipt file
        file_path: Receipt the line came from, used in error messages

    Returns:
        The parsed Item.

    Raises:
        ReceiptFormatError: if the line does not follow the item format.
    """
    split = line.strip().split(" ")
    if len(split) < 3:
        raise ReceiptFormatError(file_path, f"Unable to parse item line {line}")

    single_price = parse_price(split[0])
    if single_price is None:
        raise ReceiptFormatError(file_path, f"Unable to parse item price {split[0]}")

    consumer = split[-1]
    if len(consumer) > 1:
        raise ReceiptFormatError(file_path, f"Unable to parse item consumer {consumer}")

    if split[1].startswith("x"):
        count_str = split[1][1:]
        count = parse_digits(count_str)
        if count is None:
            raise ReceiptFormatError(file_path, f"Unable to parse item count / multiplier {split[1]}")
        if len(split) < 4:
            raise ReceiptFormatError(file_path, f"Unable to parse item line {line}")
        name = " ".join(split[2:-1])
    else:
        name = " ".join(split[1:-1])
        count = 1

    return Item(name=name, consumer=consumer, single_price=single_price, count=count)


def _read_lines(file_path: Path) -> List[str]:
    try:
        with open(file_path, "r", encoding="utf-8", newline="") as f:
            content = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise FileReadError(file_path, str(e)) from e

    # Only "\n" ends a line; a trailing "\r" is dropped from each line
    lines = content.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def parse_receipt(file_path: Union[str, Path]) -> Receipt:
    """
    Parse a whole receipt file.

    The first line names the purchaser ("<person> pirka"), every following line is
    either a comment or an item. Parsing stops at the first malformed item.

    Raises:
        FileReadError: the file could not be opened or decoded
        FileEmptyError: the file has no lines at all
        ReceiptFormatError: the header or one of the item lines is malformed
    """
    file_path = Path(file_path)
    lines = _read_lines(file_path)

    if not lines:
        raise FileEmptyError(file_path)

    purchase_line = lines[0].split(" ")
    if len(purchase_line) != 2 or purchase_line[1] != settings.header_marker or not purchase_line[0]:
        raise ReceiptFormatError(
            file_path,
            f"The first line did not match the required \"<person> {settings.header_marker}\" format!",
        )
    purchaser = purchase_line[0]

    items = []
    for line in lines[1:]:
        if line.startswith(settings.comment_prefix):
            continue  # Ignore comments
        items.append(parse_item(line, file_path))

    logger.debug(f"Parsed {len(items)} item(s) bought by {purchaser} from {file_path}")
    return Receipt(file_path=file_path, purchaser=purchaser, items=items)


def parse_receipts(
    file_paths: Sequence[Union[str, Path]]
) -> Tuple[List[Receipt], List[ReceiptParseError]]:
    """
    Parse every file independently; a broken file is logged and left out.

    Returns:
        Tuple of (receipts in input order, errors for the files that failed)
    """
    receipts = []
    failures = []
    for file_path in file_paths:
        try:
            receipts.append(parse_receipt(file_path))
        except ReceiptParseError as e:
            logger.error(f"Failed to parse file {e}")
            failures.append(e)

    logger.info(f"Parsed {len(receipts)} receipt(s), {len(failures)} failed")
    return receipts, failures
