"""terramech: Mobility Index and one-pass VCI for wheeled and tracked vehicles."""

__version__ = "0.1.0"
