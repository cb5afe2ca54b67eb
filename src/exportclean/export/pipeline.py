"""
Export pipeline implementation.

Reads a raw table, cleans it for export and writes it as CSV or XML.
"""

from dataclasses import dataclass, field
from pathlib import Path
from xml.parsers.expat import ExpatError

import pandas as pd

from exportclean.config.settings import ExportConfig, OutputConfig, OutputFormat
from exportclean.export.schema import invalid_element_names, validate_export_frame
from exportclean.normalization.frame import CleaningResult, clean_frame
from exportclean.normalization.headers import DuplicateReporter
from exportclean.normalization.tags import sanitize_tag
from exportclean.utils.logging import get_logger, table_context

log = get_logger(__name__)


@dataclass
class ExportResult:
    """
    Result of export pipeline execution.

    Attributes:
        cleaning: Outcome of the cleaning step.
        input_path: Table that was read.
        output_path: Where the cleaned table was written.
        format: Output format used.
        problems: Export validation problems (empty when valid).
    """

    cleaning: CleaningResult
    input_path: Path
    output_path: Path
    format: OutputFormat
    problems: list[str] = field(default_factory=list)

    @property
    def n_rows(self) -> int:
        """Number of data rows written."""
        return len(self.cleaning.frame)


def read_table(path: Path, encoding: str = "utf-8") -> pd.DataFrame:
    """
    Read a CSV file keeping its header row verbatim.

    pandas would rename duplicate headers itself ("Name.1"), so the file is
    read without a header and the first row is promoted by hand.

    Args:
        path: CSV file to read.
        encoding: File encoding.

    Returns:
        DataFrame of strings with the raw headers as columns.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the file has no header row.
    """
    if not path.exists():
        msg = f"Input file not found: {path}"
        raise FileNotFoundError(msg)

    try:
        raw = pd.read_csv(
            path, header=None, dtype=str, keep_default_na=False, encoding=encoding
        )
    except pd.errors.EmptyDataError as e:
        msg = f"Input file has no header row: {path}"
        raise ValueError(msg) from e

    headers = [str(h) for h in raw.iloc[0].tolist()]
    df = raw.iloc[1:].reset_index(drop=True)
    df.columns = headers

    log.debug("Read table", path=str(path), rows=len(df), columns=len(headers))
    return df


def write_table(df: pd.DataFrame, path: Path, output: OutputConfig) -> Path:
    """
    Write a cleaned table.

    Args:
        df: Cleaned DataFrame.
        path: Destination file.
        output: Output configuration (format, XML element names, encoding).

    Returns:
        The path written.

    Raises:
        ValueError: If XML is requested and a column, root or row name is
            not a valid element name.
    """
    path.parent.mkdir(parents=True, exist_ok=True)

    if output.format == OutputFormat.XML:
        invalid = invalid_element_names(df.columns)
        if invalid:
            msg = f"Cannot write XML, invalid element names: {invalid}"
            raise ValueError(msg)
        try:
            df.to_xml(
                path,
                index=False,
                root_name=sanitize_tag(output.root_name),
                row_name=sanitize_tag(output.row_name),
                parser="etree",
                encoding=output.encoding,
            )
        except ExpatError as e:
            msg = f"Cannot write XML to {path}: {e}"
            raise ValueError(msg) from e
    else:
        df.to_csv(path, index=False, encoding=output.encoding)

    log.info("Wrote table", path=str(path), format=output.format.value, rows=len(df))
    return path


def run_export(
    config: ExportConfig,
    input_path: Path,
    output_path: Path,
    reporter: DuplicateReporter | None = None,
) -> ExportResult:
    """
    Read, clean, validate and write a table.

    Validation problems are logged and returned. They only stop the export
    for XML output, where every column name becomes an element name.

    Args:
        config: Export configuration.
        input_path: CSV file to read.
        output_path: File to write.
        reporter: Optional sink for duplicate header diagnostics.

    Returns:
        ExportResult describing what was done.

    Raises:
        FileNotFoundError: If the input file does not exist.
        ValueError: If XML output is requested for a frame with invalid names.
    """
    with table_context(input_path, config.output.format.value):
        df = read_table(input_path, encoding=config.output.encoding)
        cleaning = clean_frame(df, config.cleaning, reporter=reporter)

        problems = validate_export_frame(cleaning.frame, raise_on_error=False)
        if problems and config.output.format == OutputFormat.XML:
            msg = "Cannot write XML, column names are not valid tags: " + "; ".join(
                problems
            )
            raise ValueError(msg)

        write_table(cleaning.frame, output_path, config.output)

    return ExportResult(
        cleaning=cleaning,
        input_path=input_path,
        output_path=output_path,
        format=config.output.format,
        problems=problems,
    )
