# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Sequence

from .console import MLConsole
from .doctor import open_doctor
from .errors import SpamDoctorError
from .settings import MODEL_TYPES, DoctorSettings, validate_model_type


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="spamdoctor", description="Screen short messages for spam.")
    parser.add_argument("--data-dir", default=None, help="Data directory (default: $SPAMDOCTOR_DATA_DIR or ./data)")
    parser.add_argument("--model-type", choices=MODEL_TYPES, default=None, help="Classifier to use")
    parser.add_argument("--plain", action="store_true", help="Disable rich output")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    check = sub.add_parser("check", help="Check one message")
    check.add_argument("text")
    check.add_argument("--html", action="store_true", help="Input is HTML")
    check.add_argument("--threshold", type=float, default=None, help="Confidence threshold to report")

    sub.add_parser("train", help="Retrain the model from the stored corpus")

    teach = sub.add_parser("teach", help="Add spam terms from a JSON list (nested lists allowed)")
    teach.add_argument("json_data")

    add = sub.add_parser("add", help="Store a labelled training sample")
    add.add_argument("text")
    label = add.add_mutually_exclusive_group(required=True)
    label.add_argument("--spam", dest="is_spam", action="store_true")
    label.add_argument("--ham", dest="is_spam", action="store_false")

    sub.add_parser("stats", help="Show corpus and model statistics")
    return parser.parse_args(argv)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def _settings(args: argparse.Namespace) -> DoctorSettings:
    settings = DoctorSettings.from_env()
    if args.data_dir:
        settings = DoctorSettings.for_directory(Path(args.data_dir), model_type=settings.model_type)
    if args.model_type:
        settings = DoctorSettings(
            data_dir=settings.data_dir,
            model_dir=settings.model_dir,
            model_type=validate_model_type(args.model_type),
            confidence_threshold=settings.confidence_threshold,
        )
    return settings


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    _configure_logging(args.verbose)
    console = MLConsole(enabled=not args.plain)

    try:
        doctor = open_doctor(_settings(args))
        if args.command == "check":
            if args.threshold is not None:
                doctor.set_confidence_threshold(args.threshold)
            console.detection_report(doctor.check(args.text, is_html=args.html))
        elif args.command == "train":
            console.banner()
            console.info(f"retraining {doctor.model_type} model on {len(doctor.corpus)} sample(s)")
            if doctor.retrain_model():
                console.success("model retrained")
            else:
                console.warn("training failed, see log")
                return 1
        elif args.command == "teach":
            console.success(f"{doctor.teach_doctor(args.json_data)} new term(s) learned")
        elif args.command == "add":
            doctor.add_training_sample(args.text, args.is_spam)
            console.success(f"sample stored as {'spam' if args.is_spam else 'ham'}")
        elif args.command == "stats":
            console.stats_table(doctor.get_model_stats(), title="Model stats")
    except SpamDoctorError as exc:
        console.warn(str(exc))
        return 2
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
