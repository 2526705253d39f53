# Any copyright is dedicated to the Public Domain.
# http://creativecommons.org/publicdomain/zero/1.0/

'''Upload an app build to HockeyApp and hand the resulting URLs to the next build step.'''

__version__ = '1.0'
