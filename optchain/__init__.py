from .errors import EmptyAccess
from .option import Option, Some, NONE, of, empty, from_nullable
from .combine import map2, zip as zip_options, sequence, first_present
from .logger import ConsoleLogger
from .instrument import traced
