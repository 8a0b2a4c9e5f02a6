"""Country record returned by every lookup."""

from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class Country:
    """A single row of the country code table.

    ``code`` is the ISO 3166-1 alpha-2 derived key and is always uppercase.
    The remaining fields are descriptive and play no part in lookups.
    """

    code: str
    name: str
    alpha_3: str | None = None
    numeric: str | None = None
    official_name: str | None = None
    phone_code: str | None = None
    flag: str = ""

    @property
    def display_name(self) -> str:
        """Name with code and dial prefix, e.g. ``Germany (DE) [+49]``."""
        if self.phone_code:
            return f"{self.display_name_no_phone_code} [+{self.phone_code}]"
        return self.display_name_no_phone_code

    @property
    def display_name_no_phone_code(self) -> str:
        return f"{self.name} ({self.code})"

    def to_dict(self) -> dict:
        return asdict(self)
