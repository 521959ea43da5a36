from sdo_reader.components.type_code_interpreter import TypeCodeInterpreter
from sdo_reader.components.element_directory import ElementDirectory
from sdo_reader.components.sdo_reader import SdoReader

__all__ = [
    "TypeCodeInterpreter",
    "ElementDirectory",
    "SdoReader",
]
