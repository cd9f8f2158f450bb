"""An arcade shooter where HTTP methods are the weapons, with a windowless game model and a pygame front end."""

__version__ = "0.1.0"