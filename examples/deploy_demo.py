"""deploy_demo.py

    python examples/deploy_demo.py deploy staging --force -y
    python examples/deploy_demo.py deploy-status --verbose
    python examples/deploy_demo.py help deploy
"""
import sys

from cmdmap import BoundCommand, CliEnvironment, Command
from cmdmap.utils import setup_logging


class DeployCommands:
    alias = "deploy-tools"

    def get_commands(self) -> list[Command]:
        return [
            Command(
                name="deploy",
                description="Deploy the application to an environment.",
                arguments={"environment": "Target environment, e.g. staging."},
                options={"force": "Skip safety checks.", "tag": "Release tag to deploy."},
                short_to_long_option={"f": "force"},
                provider=self,
            ),
            Command(
                name="deploy-status",
                description="Show the state of the latest deployment.",
                options={"verbose": "Include every step."},
                short_to_long_option={"v": "verbose"},
                provider=self,
            ),
        ]

    def execute_command(self, command: BoundCommand) -> int:
        if command.name == "deploy":
            environment = command.arguments.get("environment", "production")
            if not command.pre_confirmed:
                print(f"Pass --yes to deploy to {environment}.")
                return 1
            print(f"Deploying {command.options.get('tag', 'latest')} to {environment}")
            return 0
        if command.name == "deploy-status":
            print("Last deployment succeeded.")
            if command.options.get("verbose"):
                print("build: ok\nmigrate: ok\nswitch: ok")
            return 0
        raise ValueError(f"Unknown command '{command.name}'")


if __name__ == "__main__":
    setup_logging()
    env = CliEnvironment()
    env.register_provider(DeployCommands())
    sys.exit(env.forward_matched_command(sys.argv[1:]))
