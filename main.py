#This file is for development purposes only

import logging

from spira_client_impl import SpiraError, get_client


def main():
    logging.basicConfig(level=logging.DEBUG)
    client = get_client(interactive=True)

    print("\nFetching projects...")
    try:
        for project in client.project.list():
            print(f"- {project.project_id}: {project.name}")
    except SpiraError as e:
        print(f"Error connecting to Spira: {e}")

    try:
        for task in client.task.list_my():
            print(f"- [{task.project_id}] TK{task.task_id} {task.name}")
    except SpiraError as e:
        print(f"Error connecting to Spira: {e}")

if __name__ == "__main__":
    main()
