"""Import diagnostics data models."""

from pydantic import BaseModel, Field

from mt5journal.models.journal import JournalData


class ImportReport(BaseModel):
    """Counts of what happened to each row during an import pass."""

    rows_total: int = Field(default=0, ge=0, description="Data rows read")
    rows_skipped: int = Field(default=0, ge=0, description="Rows dropped as unusable")
    opens: int = Field(default=0, ge=0, description="Opening deals processed")
    closes: int = Field(default=0, ge=0, description="Closing deals matched")
    unmatched_closes: int = Field(default=0, ge=0, description="Closes with no open position")
    replaced_opens: int = Field(default=0, ge=0, description="Opens that replaced a live position")
    over_closes: int = Field(default=0, ge=0, description="Closes larger than the open position")
    open_positions: int = Field(default=0, ge=0, description="Positions still open at end of file")
    warnings: list[str] = Field(default_factory=list, description="Non-fatal diagnostics")

    @property
    def has_issues(self) -> bool:
        """Whether anything was skipped, dropped or clamped."""
        return bool(
            self.rows_skipped
            or self.unmatched_closes
            or self.replaced_opens
            or self.over_closes
        )


class ImportResult(BaseModel):
    """Journal produced by an import together with its diagnostics."""

    journal: JournalData
    report: ImportReport
