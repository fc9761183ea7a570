from .compare import relative_error, within_tolerance
from .runner import CaseResult, VectorRunner, summarize
from .vectors import VectorCase, load_vectors, parse_vectors
