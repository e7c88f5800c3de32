from fake_admission_review.cli.app import main

if __name__ == "__main__":
    main()
