# Any copyright is dedicated to the Public Domain.
# http://creativecommons.org/publicdomain/zero/1.0/

import sys

from hockeydeploy.deploy import main

if __name__ == '__main__':
    sys.exit(main())
