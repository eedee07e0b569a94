"""radixdict -- word/definition dictionary on a trie that compresses into a radix trie."""

from radixdict.constants import ABSENT_TEXT, ALPHABET, SEGMENT_SEPARATOR
from radixdict.trie import ExpandedNode, ExpandedTrie
from radixdict.compressed import CompressedNode, CompressedTrie
from radixdict.compression import CompressionError, compress_trie
from radixdict.dictionary import Dictionary, Phase
from radixdict.script import Operation, OperationType, Script, ScriptError, load_script, parse_script
from radixdict.evaluator import Evaluator, ScriptResult, run_path, run_script_file

__version__ = "0.1.0"

__all__ = [
    "ABSENT_TEXT",
    "ALPHABET",
    "SEGMENT_SEPARATOR",
    "CompressedNode",
    "CompressedTrie",
    "CompressionError",
    "Dictionary",
    "Evaluator",
    "ExpandedNode",
    "ExpandedTrie",
    "Operation",
    "OperationType",
    "Phase",
    "Script",
    "ScriptError",
    "ScriptResult",
    "compress_trie",
    "load_script",
    "parse_script",
    "run_path",
    "run_script_file",
]
