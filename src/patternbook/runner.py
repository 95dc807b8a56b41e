"""
Lesson Runner
=============

Command-line entry point that runs one or more lesson demos.

Usage:
    python -m patternbook                  # every lesson, in catalogue order
    python -m patternbook strategy chain   # just these
    python -m patternbook --list
    python -m patternbook --config my.yaml observer

Settings are loaded once here and passed to each lesson's main().
"""

import argparse
import logging
from typing import Callable, Dict, List, Optional

from patternbook.config import Settings, load_config, setup_logging
from patternbook import principles
from patternbook.behavioral import chain, command, iterator, observer, ride, strategy, template_method
from patternbook.creational import abstract_factory, app_config, builder, factory_method, simple_factory, vehicles
from patternbook.video import demo as video_demo


logger = logging.getLogger(__name__)


LessonMain = Callable[[Optional[Settings]], None]


# Catalogue order
LESSONS: Dict[str, LessonMain] = {
    "polymorphism": principles.main_polymorphism,
    "solid": principles.main_solid,
    "strategy": strategy.main,
    "simple_factory": simple_factory.main,
    "factory_method": factory_method.main,
    "abstract_factory": abstract_factory.main,
    "template_method": template_method.main,
    "vehicle_factory": vehicles.main_factory,
    "singleton": app_config.main,
    "builder": builder.main,
    "prototype": vehicles.main_prototype,
    "observer": observer.main,
    "command": command.main,
    "document_command": command.main_document,
    "ride_command": ride.main,
    "chain": chain.main,
    "iterator": iterator.main,
    "video_player": video_demo.main,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="patternbook",
        description="Run design pattern lesson demos.",
    )
    parser.add_argument(
        "lessons",
        nargs="*",
        metavar="lesson",
        help="Lesson ids to run (default: all). See --list.",
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="Print the available lesson ids and exit",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to a YAML config file",
    )
    return parser


def run_lessons(names: List[str], settings: Settings) -> None:
    for name in names:
        print(f"#### {name} ####")
        logger.debug(f"Running lesson {name}")
        LESSONS[name](settings)
        print()


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.list:
        for name in LESSONS:
            print(name)
        return 0

    unknown = [name for name in args.lessons if name not in LESSONS]
    if unknown:
        parser.error(f"unknown lesson(s): {', '.join(unknown)} (use --list)")

    settings = load_config(args.config)
    setup_logging(settings)

    run_lessons(args.lessons or list(LESSONS), settings)
    return 0
