import os
import shutil
from tempfile import mkdtemp
from functools import wraps
from typing import Optional, Sequence


def work_in_tmp_dir(kept_substrings: Optional[Sequence[str]] = None):
    """
    Execute a function in a temporary directory, e.g. to save and load a
    basis without leaving files behind

    ---------------------------------------------------------------------------
    Arguments:

        kept_substrings: List of substrings with which files are copied back
                         from the temporary directory e.g. '.json'
    """

    def func_decorator(func):
        @wraps(func)
        def wrapped_function(*args, **kwargs):
            here_path = os.getcwd()
            tmpdir_path = mkdtemp()

            os.chdir(tmpdir_path)

            try:
                out = func(*args, **kwargs)

            finally:
                for filename in os.listdir(tmpdir_path):
                    if kept_substrings is not None and any(
                        substr in filename for substr in kept_substrings
                    ):
                        shutil.copy(
                            src=os.path.join(tmpdir_path, filename),
                            dst=os.path.join(here_path, filename),
                        )

                os.chdir(here_path)
                shutil.rmtree(tmpdir_path)

            return out

        return wrapped_function

    return func_decorator
