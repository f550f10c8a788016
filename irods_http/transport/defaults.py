class Defaults:
    form_content_type = "application/x-www-form-urlencoded"
    json_content_type = "application/json"

    auth_scheme = "Bearer"

    form_separator = "&"
    pair_separator = "="
    query_separator = "?"

    encoding = "utf-8"

    @staticmethod
    def get_encoding(options):
        if options is not None and options.encoding:
            return options.encoding
        return Defaults.encoding
