import numpy
import pyximport

pyximport.install(setup_args={
  'include_dirs': [numpy.get_include()]
}, language_level=3)

from int_set.array_set import IntSet, DEFAULT_CAPACITY, FIELD_SEPARATOR, GROWTH_FACTOR


__all__ = ['IntSet', 'DEFAULT_CAPACITY', 'FIELD_SEPARATOR', 'GROWTH_FACTOR']
