class ExtractionError(Exception):
    '''
    Base class for all string extraction errors
    '''


class GoSyntaxError(ExtractionError):
    '''
    Raised when a Go source file cannot be tokenized or parsed
    '''
    def __init__(self, origin, line, message):
        super().__init__(f"{origin}:{line}: {message}")
        self.origin = origin
        self.line = line
        self.message = message
