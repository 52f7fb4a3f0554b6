class UnsupportedSyntaxException(Exception):
    """
    Raised when a media type does not identify any syntax in a registry.
    """

    def __init__(self, media_type: str, supported: tuple = ()):
        self.media_type = media_type
        self.message = f'No RDF syntax is registered for the media type "{media_type}".'
        if supported:
            self.message += f" Supported media types are: {', '.join(supported)}"
        super().__init__(self.message)
