import dotenv

dotenv.load_dotenv()

from osrs_wiki_mcp.server import main  # noqa: E402


if __name__ == "__main__":
    main()
