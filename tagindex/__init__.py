from .about import __version__
from .index.tagged_index import TaggedIndex
from .utility.many_to_many_dict import ManyToManyDict

assert isinstance(__version__, str)
assert isinstance(TaggedIndex, type)
assert isinstance(ManyToManyDict, type)
