import logging
from urllib.parse import quote

import requests

LOGGER = logging.getLogger(__name__)


class CountryDownloader:
    BASE_URL = "https://restcountries.com/v3.1"  # Base URL of the REST Countries API
    NAME_FIELDS = {"fields": "name"}  # Only the names are needed to build the index

    def __init__(self, base_url=None, timeout=10):
        """
        Initializes the CountryDownloader instance, setting up an empty list for storing country names
        and calls the method to download data.

        :param base_url: Base URL of the countries API, defaults to BASE_URL
        :param timeout: Timeout in seconds for every request
        """
        self.base_url = (base_url or CountryDownloader.BASE_URL).rstrip("/")
        self.timeout = timeout
        self.country_names = []  # List to store all downloaded country names
        self.download_data()  # Initiating the data download on object creation

    def __get_json_from_url(self, url, params=None):
        """
        Sends a GET request to the specified URL and returns the decoded JSON body.
        Logs an error message if the request fails or the body is not JSON.

        :param url: URL to fetch data from
        :param params: Query parameters of the request
        :return: decoded JSON if successful, None otherwise
        """
        try:
            response = requests.get(url, params=params, timeout=self.timeout)
        except requests.RequestException as err:
            LOGGER.error("Error: Could not reach %s: %s", url, err)
            return None
        if response.status_code != 200:
            LOGGER.error("Error: %s answered with status %s", url, response.status_code)
            return None
        try:
            return response.json()
        except ValueError as err:
            LOGGER.error("Error: Malformed response from %s: %s", url, err)
            return None

    @staticmethod
    def __parse_country_names(data):
        """
        Extracts the common names from a list of country records.
        Records without a usable common name are skipped.

        :param data: Decoded JSON list of country records
        :return: List of country names
        """
        if not isinstance(data, list):
            LOGGER.error("Error: Expected a list of countries, got %s", type(data).__name__)
            return []
        names = []
        for country in data:
            try:
                name = country["name"]["common"]
            except (KeyError, TypeError):
                continue
            if isinstance(name, str) and name:
                names.append(name)
        return names

    def download_data(self):
        """
        Downloads the list of all countries and stores their common names.
        A failed download leaves the list empty.
        """
        data = self.__get_json_from_url(f"{self.base_url}/all", self.NAME_FIELDS)
        self.country_names = self.__parse_country_names(data) if data is not None else []
        LOGGER.info("Downloaded %d country names", len(self.country_names))

    def get_country_names(self):
        """
        Returns the country names that have been downloaded.

        :return: List of country names
        """
        return self.country_names

    def get_country_details(self, country_name):
        """
        Fetches the full record of a country by its exact name.

        :param country_name: Name of the country as shown in the suggestions
        :return: The country record as a dictionary, None if it was not found
        """
        url = f"{self.base_url}/name/{quote(country_name, safe='')}"
        data = self.__get_json_from_url(url, {"fullText": "true"})
        if not isinstance(data, list) or not data or not isinstance(data[0], dict):
            LOGGER.error("Error fetching country details for '%s'", country_name)
            return None
        return data[0]
