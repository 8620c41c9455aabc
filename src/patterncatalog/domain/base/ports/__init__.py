"""Domain ports - interfaces the domain depends on and infrastructure implements."""

from .output_port import NullOutput, OutputPort

__all__: list[str] = ["NullOutput", "OutputPort"]
