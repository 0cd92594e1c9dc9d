from .parser import parse_program
