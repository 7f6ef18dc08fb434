from env_creator.main import main

if __name__ == "__main__":
    main()
