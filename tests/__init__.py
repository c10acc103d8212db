from .test_omap_core import *
from .test_util_tools import *
