import stat

PROMPT = "$ "
EXEC_BITS = stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH

# exit status reported when a command cannot be found
STATUS_NOT_FOUND = 127
