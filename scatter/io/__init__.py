from .marshal import to_points, to_vector, from_points, from_vector, basis_from_spec
from .current import (CurrentInterpolant, set_current, clear_current, current_version, get_current,
                      evaluate_current, get_interpolant, get_values)
