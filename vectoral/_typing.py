# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.


from typing import Union
from datetime import datetime

import numpy as np
import numpy.typing as npt

DOUBLE_ARRAY = npt.NDArray[np.float64]
ARRAY_LIKE = npt.ArrayLike

SCALAR = Union[int, float, np.integer, np.floating]
"""
A plain (non-extended) numeric scalar
"""

DatetimeLike = datetime

TIME_LIKE = Union[float, DatetimeLike]
"""
Anything that can be used as a key time for interpolation
"""
