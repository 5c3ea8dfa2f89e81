"""
Main entry point for the Academia records manager.
"""

import argparse
import sys
from typing import Optional

from .config import load_config
from .core.exceptions import AcademiaException, ConfigurationError
from .services import UniversityManager
from .shell import MenuShell
from .utils.logger import configure_logging, logger


class AcademiaPlatform:
    """Main platform class wiring the registry to its front ends."""

    def __init__(self, config: Optional[dict] = None):
        self._config = config or load_config()
        configure_logging(self._config.get('log_level', 'WARNING'))
        self._manager = UniversityManager()
        self._rest_api = None
        logger.info("Academia platform initialized")

    @property
    def manager(self) -> UniversityManager:
        return self._manager

    def create_sample_data(self):
        """Create sample data for demonstration."""
        print("Creating sample data...")
        manager = self._manager

        alice = manager.add_student("Alice Johnson", 19, "alice@university.edu", "555-0101")
        bob = manager.add_student("Bob Smith", 21, "bob@university.edu", "555-0102")
        manager.add_student("Carol Davis", 20, "carol@university.edu", "555-0103")

        turing = manager.add_teacher("Alan Turing", 41, "turing@university.edu", "555-0201",
                                     "Computer Science")
        noether = manager.add_teacher("Emmy Noether", 45, "noether@university.edu", "555-0202",
                                      "Mathematics")

        manager.create_course("CS101", "Introduction to Computer Science",
                              "Basic concepts of computer science and programming", 3)
        manager.create_course("CS201", "Data Structures and Algorithms", "", 4)
        manager.create_course("MATH101", "Calculus I", "Differential and integral calculus", 4)

        manager.assign_teacher_to_course(turing.id, "CS101")
        manager.assign_teacher_to_course(turing.id, "CS201")
        manager.assign_teacher_to_course(noether.id, "MATH101")

        manager.enroll_student_in_course(alice.id, "CS101")
        manager.enroll_student_in_course(alice.id, "MATH101")
        manager.enroll_student_in_course(bob.id, "CS101")

        print("✓ Sample data created")

    def run_demo(self):
        """Run a demonstration of the registry."""
        print("Running Academia demonstration...")
        self.create_sample_data()

        print("\n=== Students ===")
        for student in self._manager.get_all_students():
            print(student.display_info())
            print(self._manager.display_student_courses(student.id))
            print()

        print("=== Courses ===")
        for course in self._manager.get_all_courses():
            print(course.display_info())
            print(self._manager.display_course_students(course.course_code))
            print()

        print(f"Statistics: {self._manager.get_statistics()}")
        print("\n✓ Demo completed")

    def run_shell(self, stdin=None, stdout=None):
        """Run the interactive text menu."""
        if self._config.get('seed_demo_data'):
            self.create_sample_data()
        MenuShell(self._manager, stdin=stdin, stdout=stdout).run()

    def create_rest_app(self):
        """Build the FastAPI application over this platform's registry."""
        if self._rest_api is None:
            from .api.rest_api import AcademiaRestAPI
            self._rest_api = AcademiaRestAPI(self._manager)
        return self._rest_api.app

    def start_rest_server(self):
        """Serve the REST API in the foreground."""
        import uvicorn

        if self._config.get('seed_demo_data'):
            self.create_sample_data()
        host = self._config['rest_host']
        port = self._config['rest_port']
        print(f"✓ REST server starting on http://{host}:{port} (docs at /docs)")
        uvicorn.run(self.create_rest_app(), host=host, port=port,
                    log_level=self._config['log_level'].lower())


def main(argv=None):
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Academia Records Manager")
    parser.add_argument("--config", type=str, help="Configuration file path")
    parser.add_argument("--demo", action="store_true", help="Run demo mode")
    parser.add_argument("--rest", action="store_true", help="Serve the REST API instead of the menu")
    parser.add_argument("--host", type=str, help="REST server host")
    parser.add_argument("--port", type=int, help="REST server port")
    parser.add_argument("--log-level", type=str, help="Logging level (DEBUG, INFO, WARNING, ...)")
    parser.add_argument("--seed", action="store_true", default=None,
                        help="Load sample data before starting")

    args = parser.parse_args(argv)

    try:
        config = load_config(args.config, overrides={
            'rest_host': args.host,
            'rest_port': args.port,
            'log_level': args.log_level,
            'seed_demo_data': args.seed,
        })
    except ConfigurationError as e:
        print(f"Configuration error: {e.message}", file=sys.stderr)
        return 2

    platform = AcademiaPlatform(config)

    try:
        if args.demo:
            platform.run_demo()
        elif args.rest:
            platform.start_rest_server()
        else:
            platform.run_shell()
    except AcademiaException as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\nShutting down...")
    return 0


if __name__ == "__main__":
    sys.exit(main())
