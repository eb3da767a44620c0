from .kernel import Kernel
