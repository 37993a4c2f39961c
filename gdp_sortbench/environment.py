# environment.py
# ------------------------------------------------------------
# Machine lines for the run banner, so console output from a
# benchmark can be tied back to the box it ran on.
# ------------------------------------------------------------

import platform
from typing import List

import psutil


def machine_banner() -> List[str]:
    ram_gb = psutil.virtual_memory().total / (1024**3)
    return [
        f"Machine      : {platform.platform()} | Python {platform.python_version()}",
        f"Cores        : {psutil.cpu_count(logical=True)} logical ({psutil.cpu_count(logical=False)} physical)",
        f"RAM          : ~{ram_gb:.2f} GB",
    ]
