from irods_http.transport.defaults import Defaults


class Options:
    def __init__(self, quote_values=False, encoding=None):
        self.__quote_values = quote_values
        self.__encoding = encoding

    @property
    def quote_values(self):
        return self.__quote_values

    @quote_values.setter
    def quote_values(self, value):
        self.__quote_values = value

    @property
    def encoding(self):
        return self.__encoding

    @encoding.setter
    def encoding(self, value):
        self.__encoding = value

    def get_encoding(self):
        return Defaults.get_encoding(self)
