from dataclasses import asdict, dataclass

UNKNOWN = "Unknown"


@dataclass
class CountryDetails:
    """Details of a single country as shown on the detail card"""

    name: str
    capital: str = UNKNOWN
    population: int = 0
    languages: str = UNKNOWN
    flag_url: str = ""

    @classmethod
    def from_record(cls, record: dict) -> "CountryDetails":
        """
        This method builds the details from a record of the REST Countries API.
        :param record: One country record, as returned by the API.
        :return: The parsed CountryDetails
        :raises ValueError: If the record carries no common name.
        """
        try:
            name = record["name"]["common"]
        except (KeyError, TypeError) as err:
            raise ValueError("Country record has no common name") from err
        if not isinstance(name, str) or not name:
            raise ValueError("Country record has no common name")

        capital = record.get("capital")
        if isinstance(capital, list):
            capital = ", ".join(str(c) for c in capital)
        elif not isinstance(capital, str):
            capital = UNKNOWN

        languages = record.get("languages")
        if isinstance(languages, dict) and languages:
            languages = ", ".join(str(language) for language in languages.values())
        else:
            languages = UNKNOWN

        flags = record.get("flags")
        flag_url = (flags.get("svg") or "") if isinstance(flags, dict) else ""

        return cls(
            name=name,
            capital=capital or UNKNOWN,
            population=int(record.get("population") or 0),
            languages=languages,
            flag_url=flag_url,
        )

    @property
    def population_display(self) -> str:
        return f"{self.population:,}"

    def to_dict(self):
        return asdict(self)
