from . import args
from .args import Args
from .entrypoint import entrypoint
