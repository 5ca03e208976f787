# ------------------------------------------------------------------------------
#  Swarmfield
#  Copyright (c) 2025 Fabio Oddi
#
#  This file is part of Swarmfield, released under the BSD 3-Clause License.
#  You may use, modify, and redistribute this file according to the terms of the
#  license. Attribution is required if this code is used in other works.
# ------------------------------------------------------------------------------

import sys, getopt, logging
from pathlib import Path

from swarmfield.configuration.config import Config
from swarmfield.main.environment import Environment
from swarmfield.util.logging_util import configure_logging, is_file_logging_enabled, shutdown_logging


def print_usage(errcode=None):
    print("Usage: swarmfield -c <config_file_path>")
    sys.exit(errcode)


def main(argv=None):
    if argv is None:
        argv = sys.argv[1:]
    configfile = ""
    opts = []
    try:
        opts, args = getopt.getopt(argv, "hc:", ["help", "config="])
    except getopt.GetoptError:
        logging.fatal("Error in parsing argument list")
        print_usage(1)

    for opt, arg in opts:
        if opt in ("-h", "--help"):
            print_usage()
        elif opt in ("-c", "--config"):
            configfile = arg

    if not configfile:
        logging.fatal("No configuration file provided")
        print_usage(1)

    config_path_resolved = Path(configfile).expanduser().resolve()
    exit_code = 0
    try:
        my_config = Config(config_path=str(config_path_resolved))
        logging_cfg = my_config.logging
        if is_file_logging_enabled(logging_cfg):
            archive_path = configure_logging(logging_cfg, log_filename_prefix=config_path_resolved.stem)
            logging.info(f"Writing logs to {archive_path}")
        else:
            configure_logging(logging_cfg)
        Environment(my_config).start()
    except Exception as e:
        logging.fatal(f"Failed to run simulation: {e}")
        exit_code = 1
    finally:
        shutdown_logging()
    sys.exit(exit_code)


if __name__ == "__main__":
    main(sys.argv[1:])
