class InputNotIterable(TypeError):
    """Raised when a value can't be traversed as ordered (key, value) pairs."""

    def __init__(self, value):
        super().__init__("Can't traverse data of type %s as key-value pairs" % type(value).__name__)
        self.value = value
