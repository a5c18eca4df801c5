import logging

from plainperm.factoradic import RankError, from_factoradic, to_factoradic
from plainperm.lex import (
    count_arrangements, lex_next, lex_next_sort, lex_perms, LexGenerator
)
from plainperm.rank import lehmer_code, lex_rank, lex_unrank
from plainperm.sjt import sjt_even, sjt_perms, sjt_recursive, SJTGenerator

logging.getLogger(__name__).addHandler(logging.NullHandler())
