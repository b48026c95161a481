class ThematicMapError(Exception):
    pass


class DegenerateInputError(ThematicMapError, ValueError):
    """Nothing meaningful can be computed from the given records."""


class ColorRangeError(ThematicMapError, ValueError):
    """A value outside [0, 1] was passed to the colour lookup."""


class UnknownGradientError(ThematicMapError, KeyError):
    def __init__(self, name, known):
        self.name = name
        self.known = known
        super().__init__(f"Unknown gradient {name!r}, choose one of: {', '.join(known)}")

    def __str__(self):
        return self.args[0]


class MissingColumnsError(ThematicMapError):
    def __init__(self, path, missing):
        self.path = path
        self.missing = missing
        super().__init__(f"{path} is missing required columns: {', '.join(missing)}")
