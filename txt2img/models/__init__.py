from . import generation
