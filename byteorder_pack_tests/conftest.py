import os

from byteorder_pack.conf import UNITTESTS_SETTINGS_FILEPATH

os.environ['BYTEORDER_PACK_CONFIG_YAML'] = os.environ.get('BYTEORDER_PACK_TEST_CONFIG_YAML', UNITTESTS_SETTINGS_FILEPATH)
