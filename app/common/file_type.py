from enum import Enum


class FileType(str, Enum):
  PDF = "PDF"
  TXT = "TXT"
