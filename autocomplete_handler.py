import logging

from config import Config
from countries_downloader import CountryDownloader
from country_details import CountryDetails
from trie import Trie

LOGGER = logging.getLogger(__name__)


class AutocompleteHandler:

    def __init__(self, config: Config, downloader: CountryDownloader = None, trie: Trie = None):
        """
        Constructor method where the handler's collaborators are set up based on the given config.
        The downloader fetches the country names on creation; the trie is left empty until populate() is called.
        """
        self.SUGGESTION_LIMIT = config.SUGGESTION_LIMIT
        if downloader is None:
            downloader = CountryDownloader(config.API_URL, config.REQUEST_TIMEOUT)
        self.downloader = downloader
        self.trie = trie if trie is not None else Trie()

    def populate(self) -> int:
        """
        This method inserts every downloaded country name into the trie.
        :return: The number of names handed to the trie
        """
        countries = self.downloader.get_country_names()
        if not countries:
            LOGGER.error("No country names fetched")
            return 0
        for country in countries:
            self.trie.insert(country)
        LOGGER.info("Indexed %d country names", len(countries))
        return len(countries)

    def suggest(self, text: str) -> list:
        """
        This method returns the suggestions for the text typed so far.
        Surrounding whitespace is ignored and empty input gives no suggestions.
        :param text: The raw input of the user.
        :return: List of country names starting with the input
        """
        query = (text or "").strip()
        if not query:
            return []
        suggestions = self.trie.search(query)
        if self.SUGGESTION_LIMIT:
            suggestions = suggestions[:self.SUGGESTION_LIMIT]
        LOGGER.debug("Query '%s' gave %d suggestions", query, len(suggestions))
        return suggestions

    def select(self, name: str):
        """
        This method looks up the details of a selected suggestion.
        :param name: The exact country name.
        :return: CountryDetails or None if the lookup failed
        """
        record = self.downloader.get_country_details(name)
        if record is None:
            return None
        try:
            return CountryDetails.from_record(record)
        except (ValueError, TypeError) as err:
            LOGGER.error("Malformed details for '%s': %s", name, err)
            return None
