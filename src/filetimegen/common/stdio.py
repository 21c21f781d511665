import os
import sys


# Names are handled as raw bytes, undecodable ones survive as surrogate escapes

def read_stdin() -> str:
  return os.fsdecode(sys.stdin.buffer.read())


def write_stdout(text: str) -> None:
  sys.stdout.flush()
  sys.stdout.buffer.write(os.fsencode(text))
  sys.stdout.buffer.flush()
